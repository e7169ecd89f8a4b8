"""Documents exchanged with the full-text search backend."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field as PydanticField, field_validator

from mail_fts.models.collection import Collection
from mail_fts.models.document_set import MAX_DOCUMENT_ID
from mail_fts.models.fragment import Field, TextFragment


class HeaderEntry(BaseModel):
    """A single header occurrence; names may repeat within a document."""

    model_config = ConfigDict(frozen=True)

    name: str = PydanticField(description="Header name, verbatim")
    value: str = PydanticField(description="Header text")


class IndexableDocument(BaseModel):
    """Backend-facing record for one mail object."""

    model_config = ConfigDict(frozen=True)

    document_id: int = PydanticField(ge=0, le=MAX_DOCUMENT_ID, description="Document id")
    account_id: int = PydanticField(ge=0, le=MAX_DOCUMENT_ID, description="Owning account id")
    body: tuple[str, ...] = PydanticField(default=(), description="Body text parts")
    attachments: tuple[str, ...] = PydanticField(default=(), description="Attachment text parts")
    keywords: tuple[str, ...] = PydanticField(default=(), description="Keywords")
    header: tuple[HeaderEntry, ...] = PydanticField(default=(), description="Header entries")

    def to_source(self) -> dict[str, Any]:
        """Return the JSON document sent to the backend."""
        return self.model_dump(mode="json")


class FtsDocument(BaseModel):
    """Text of one mail object as handed over by the mail store."""

    account_id: int = PydanticField(ge=0, le=MAX_DOCUMENT_ID)
    collection: Collection
    document_id: int = PydanticField(ge=0, le=MAX_DOCUMENT_ID)
    parts: list[TextFragment] = PydanticField(default_factory=list)

    @field_validator("collection", mode="before")
    @classmethod
    def _parse_collection(cls, value: Any) -> Collection:
        return Collection.parse(value)

    def index(self, field: Field, text: str) -> FtsDocument:
        """Append a fragment; returns ``self`` so calls can be chained."""
        self.parts.append(TextFragment(field=field, text=text))
        return self

    def index_keyword(self, text: str) -> FtsDocument:
        return self.index(Field.keyword(), text)

"""Classified text fragments produced by the message parser.

A mail object reaches the indexer as a flat sequence of fragments, each one a
piece of extracted text tagged with the role it plays in the message.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field as PydanticField, model_validator


class FieldKind(str, Enum):
    """Semantic role of a text fragment."""

    HEADER = "header"
    BODY = "body"
    ATTACHMENT = "attachment"
    KEYWORD = "keyword"


class Field(BaseModel):
    """Classification of a fragment.

    Header fields carry the header name exactly as the parser produced it;
    every other kind has no name.
    """

    model_config = ConfigDict(frozen=True)

    kind: FieldKind
    name: str | None = PydanticField(default=None, description="Header name, headers only")

    @model_validator(mode="after")
    def _check_name(self) -> Field:
        if self.kind is FieldKind.HEADER:
            if self.name is None:
                raise ValueError("header fields require a name")
        elif self.name is not None:
            raise ValueError(f"{self.kind.value} fields do not take a name")
        return self

    @classmethod
    def header(cls, name: str) -> Field:
        return cls(kind=FieldKind.HEADER, name=name)

    @classmethod
    def body(cls) -> Field:
        return cls(kind=FieldKind.BODY)

    @classmethod
    def attachment(cls) -> Field:
        return cls(kind=FieldKind.ATTACHMENT)

    @classmethod
    def keyword(cls) -> Field:
        return cls(kind=FieldKind.KEYWORD)


class TextFragment(BaseModel):
    """A single piece of extracted text plus its classification."""

    model_config = ConfigDict(frozen=True)

    field: Field
    text: str

    @classmethod
    def header(cls, name: str, text: str) -> TextFragment:
        return cls(field=Field.header(name), text=text)

    @classmethod
    def body(cls, text: str) -> TextFragment:
        return cls(field=Field.body(), text=text)

    @classmethod
    def attachment(cls, text: str) -> TextFragment:
        return cls(field=Field.attachment(), text=text)

    @classmethod
    def keyword(cls, text: str) -> TextFragment:
        return cls(field=Field.keyword(), text=text)

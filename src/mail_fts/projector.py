"""Projection of classified text fragments into backend documents.

The projector is pure: it performs no I/O and accepts any sequence of
fragments, including an empty one.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from mail_fts.models import (
    FieldKind,
    FtsDocument,
    HeaderEntry,
    IndexableDocument,
    TextFragment,
)


@dataclass
class DocumentBuilder:
    """Mutable field sequences of a document under construction."""

    account_id: int
    document_id: int
    body: list[str] = field(default_factory=list)
    attachments: list[str] = field(default_factory=list)
    keywords: list[str] = field(default_factory=list)
    header: list[HeaderEntry] = field(default_factory=list)

    def build(self) -> IndexableDocument:
        return IndexableDocument(
            document_id=self.document_id,
            account_id=self.account_id,
            body=tuple(self.body),
            attachments=tuple(self.attachments),
            keywords=tuple(self.keywords),
            header=tuple(self.header),
        )


_TEXT_SEQUENCES = {
    FieldKind.BODY: "body",
    FieldKind.ATTACHMENT: "attachments",
    FieldKind.KEYWORD: "keywords",
}


def classify(fragment: TextFragment, builder: DocumentBuilder) -> None:
    """Append the fragment's text to the sequence matching its field kind."""

    kind = fragment.field.kind
    if kind is FieldKind.HEADER:
        # Consumers tell headers apart by exact name, so no normalisation here.
        builder.header.append(HeaderEntry(name=fragment.field.name, value=fragment.text))
        return
    getattr(builder, _TEXT_SEQUENCES[kind]).append(fragment.text)


def project(
    account_id: int,
    document_id: int,
    fragments: Iterable[TextFragment],
) -> IndexableDocument:
    """Fold a fragment stream into a single indexable document.

    Args:
        account_id: Owning account.
        document_id: Document id, unique within the account and collection.
        fragments: Classified text in parser order.

    Returns:
        IndexableDocument: Document whose sequences follow input order.
    """

    builder = DocumentBuilder(account_id=account_id, document_id=document_id)
    for fragment in fragments:
        classify(fragment, builder)
    return builder.build()


def project_document(document: FtsDocument) -> IndexableDocument:
    """Project a mail store ``FtsDocument``."""
    return project(document.account_id, document.document_id, document.parts)

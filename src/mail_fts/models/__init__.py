"""Data models for mail-fts.

This package contains the Pydantic models and small value types exchanged
between the mail store, the projector and the search backend.
"""

from .collection import Collection, build_index_names
from .document import FtsDocument, HeaderEntry, IndexableDocument
from .document_set import MAX_DOCUMENT_ID, DocumentIdSet, IdSet, check_account_id, enumerate_ids
from .fragment import Field, FieldKind, TextFragment

__all__ = [
    "Collection",
    "DocumentIdSet",
    "Field",
    "FieldKind",
    "FtsDocument",
    "HeaderEntry",
    "IdSet",
    "IndexableDocument",
    "MAX_DOCUMENT_ID",
    "TextFragment",
    "build_index_names",
    "check_account_id",
    "enumerate_ids",
]

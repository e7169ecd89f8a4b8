"""Delete-by-query bodies for account-scoped removals.

Documents are addressed by their ``account_id``/``document_id`` attributes,
never by the backend's primary key.
"""

from __future__ import annotations

import uuid
from collections.abc import Sequence
from typing import Any

from mail_fts.models import Collection

# Namespace for deterministic backend document keys.
_DOCUMENT_KEY_NAMESPACE = uuid.uuid5(uuid.NAMESPACE_URL, "urn:mail-fts:document")


def account_documents_query(account_id: int, document_ids: Sequence[int]) -> dict[str, Any]:
    """Match ``document_ids`` of one account.

    An empty ``document_ids`` produces an empty terms clause, which matches
    no documents.
    """

    return {
        "bool": {
            "must": [
                {"match": {"account_id": account_id}},
                {"terms": {"document_id": list(document_ids)}},
            ]
        }
    }


def account_query(account_id: int) -> dict[str, Any]:
    """Match every document of one account."""

    return {
        "bool": {
            "must": [
                {"match": {"account_id": account_id}},
            ]
        }
    }


def document_key(account_id: int, collection: Collection, document_id: int) -> str:
    """Return the deterministic backend key for a document."""

    return str(
        uuid.uuid5(
            _DOCUMENT_KEY_NAMESPACE,
            f"{collection.name.lower()}:{account_id}:{document_id}",
        )
    )

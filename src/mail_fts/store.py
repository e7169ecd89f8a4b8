"""Full-text store: index and remove mail documents in the search backend.

Every operation is a single request. Failures are raised to the caller
immediately and never retried here.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Optional

import structlog

from mail_fts.backend.base import BackendResponse, SearchBackend
from mail_fts.config import Settings
from mail_fts.exceptions import (
    BackendTransportError,
    DocumentIndexError,
    DocumentRemovalError,
)
from mail_fts.models import (
    Collection,
    DocumentIdSet,
    FtsDocument,
    IndexableDocument,
    build_index_names,
    check_account_id,
    enumerate_ids,
)
from mail_fts.projector import project_document
from mail_fts.queries import account_documents_query, account_query, document_key

logger = structlog.get_logger()


class FullTextStore:
    """Account-scoped indexing and removal against one search backend."""

    def __init__(
        self,
        backend: SearchBackend,
        settings: Optional[Settings] = None,
    ) -> None:
        """Create a store.

        Args:
            backend: Search backend client.
            settings: Application settings. If None, uses default settings.
        """
        from mail_fts.config import get_settings

        self.settings = settings or get_settings()
        self._backend = backend
        self._index_names = build_index_names(self.settings.index_prefix)

    @property
    def index_names(self) -> Mapping[Collection, str]:
        """Read-only collection -> index name table."""
        return self._index_names

    def index_name(self, collection: Collection | int | str) -> str:
        """Resolve the index name of a collection.

        Raises:
            InvalidCollectionError: If the collection is unknown.
        """
        return self._index_names[Collection.parse(collection)]

    async def index(self, document: IndexableDocument, collection: Collection | int | str) -> None:
        """Index one document into the collection's index.

        Raises:
            InvalidCollectionError: If the collection is unknown.
            DocumentIndexError: If the request fails or is rejected.
        """

        collection = Collection.parse(collection)
        index = self._index_names[collection]
        key = (
            document_key(document.account_id, collection, document.document_id)
            if self.settings.deterministic_ids
            else None
        )

        try:
            response = await self._backend.index(index, document.to_source(), key)
        except BackendTransportError as exc:
            raise DocumentIndexError("Failed to index document", str(exc)) from exc
        _check(response, DocumentIndexError, "Failed to index document")

        logger.debug(
            "fts_document_indexed",
            index=index,
            account_id=document.account_id,
            document_id=document.document_id,
        )

    async def index_document(self, document: FtsDocument) -> None:
        """Project a mail store document and index it."""
        await self.index(project_document(document), document.collection)

    async def remove(
        self,
        account_id: int,
        collection: Collection | int | str,
        document_ids: DocumentIdSet | Iterable[int],
    ) -> None:
        """Remove documents of one account from one collection.

        Raises:
            ValueError: If the account id is not an unsigned 32-bit integer.
            InvalidCollectionError: If the collection is unknown.
            DocumentRemovalError: If the request fails or is rejected.
        """

        check_account_id(account_id)
        collection = Collection.parse(collection)
        ids = enumerate_ids(document_ids)
        index = self._index_names[collection]
        await self._delete_by_query([index], account_documents_query(account_id, ids))

        logger.debug(
            "fts_documents_removed",
            index=index,
            account_id=account_id,
            document_count=len(ids),
        )

    async def remove_all(self, account_id: int) -> None:
        """Remove every document of one account from every collection.

        Raises:
            ValueError: If the account id is not an unsigned 32-bit integer.
            DocumentRemovalError: If the request fails or is rejected.
        """

        check_account_id(account_id)
        indices = list(self._index_names.values())
        await self._delete_by_query(indices, account_query(account_id))

        logger.debug("fts_account_removed", indices=indices, account_id=account_id)

    async def close(self) -> None:
        await self._backend.close()

    async def __aenter__(self) -> FullTextStore:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def _delete_by_query(self, indices: list[str], query: dict) -> None:
        try:
            response = await self._backend.delete_by_query(indices, query)
        except BackendTransportError as exc:
            raise DocumentRemovalError("Failed to remove document", str(exc)) from exc
        _check(response, DocumentRemovalError, "Failed to remove document")


def _check(
    response: BackendResponse,
    error: type[DocumentIndexError] | type[DocumentRemovalError],
    message: str,
) -> None:
    if not response.success:
        raise error(message, response.describe())

"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import itertools
from collections.abc import Sequence
from typing import Any, Optional

import pytest

from mail_fts.backend import BackendResponse
from mail_fts.exceptions import BackendTransportError


class FakeBackend:
    """In-memory search backend understanding the bool/match/terms queries."""

    def __init__(self) -> None:
        self.indices: dict[str, dict[str, dict[str, Any]]] = {}
        self.calls: list[tuple[str, Any]] = []
        self.fail_status: Optional[int] = None
        self.transport_error: Optional[str] = None
        self.closed = False
        self._auto_ids = itertools.count(1)

    async def index(
        self,
        index: str,
        document: dict[str, Any],
        document_key: Optional[str] = None,
    ) -> BackendResponse:
        self.calls.append(("index", (index, document, document_key)))
        failure = self._failure()
        if failure is not None:
            return failure

        key = document_key or f"auto-{next(self._auto_ids)}"
        self.indices.setdefault(index, {})[key] = document
        return BackendResponse(success=True, status=201, body={"_id": key, "result": "created"})

    async def delete_by_query(
        self,
        indices: Sequence[str],
        query: dict[str, Any],
    ) -> BackendResponse:
        self.calls.append(("delete_by_query", (list(indices), query)))
        failure = self._failure()
        if failure is not None:
            return failure

        deleted = 0
        for name in indices:
            documents = self.indices.get(name, {})
            for key in [k for k, doc in documents.items() if _matches(doc, query)]:
                del documents[key]
                deleted += 1
        return BackendResponse(success=True, status=200, body={"deleted": deleted})

    async def close(self) -> None:
        self.closed = True

    def documents(self, index: str) -> list[dict[str, Any]]:
        return list(self.indices.get(index, {}).values())

    def _failure(self) -> Optional[BackendResponse]:
        if self.transport_error is not None:
            raise BackendTransportError(self.transport_error)
        if self.fail_status is not None:
            return BackendResponse(
                success=False,
                status=self.fail_status,
                body={"error": {"type": "test_failure"}},
            )
        return None


def _matches(document: dict[str, Any], query: dict[str, Any]) -> bool:
    for clause in query["bool"]["must"]:
        if "match" in clause:
            ((field, value),) = clause["match"].items()
            if document.get(field) != value:
                return False
        elif "terms" in clause:
            ((field, values),) = clause["terms"].items()
            if document.get(field) not in values:
                return False
        else:
            raise AssertionError(f"Unsupported clause: {clause}")
    return True


@pytest.fixture
def mock_settings():
    """Provide mock settings for testing."""
    from mail_fts.config import Settings

    return Settings(
        elasticsearch_hosts=["http://test:9200"],
        index_prefix="test",
        log_level="DEBUG",
        debug=True,
    )


@pytest.fixture
def fake_backend() -> FakeBackend:
    """Provide an empty in-memory backend."""
    return FakeBackend()


@pytest.fixture
def store(fake_backend: FakeBackend, mock_settings):
    """Provide a store wired to the in-memory backend."""
    from mail_fts.store import FullTextStore

    return FullTextStore(fake_backend, mock_settings)


@pytest.fixture
def sample_fts_document() -> dict:
    """Provide a mail store document as exported to JSON."""
    return {
        "account_id": 7,
        "collection": "email",
        "document_id": 42,
        "parts": [
            {"field": {"kind": "header", "name": "Subject"}, "text": "Weekly Newsletter - Python Tips"},
            {"field": {"kind": "header", "name": "From"}, "text": "newsletter@python.org"},
            {"field": {"kind": "body"}, "text": "Welcome to this week's Python tips!"},
            {"field": {"kind": "attachment"}, "text": "tips.pdf contents"},
            {"field": {"kind": "keyword"}, "text": "$seen"},
        ],
    }

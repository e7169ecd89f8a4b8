"""Minimal interface the store needs from a search backend."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Optional, Protocol


@dataclass(frozen=True)
class BackendResponse:
    """Outcome of a single backend request."""

    success: bool
    status: int
    body: Any = None

    def describe(self) -> str:
        """Diagnostic text for error messages."""
        return f"status={self.status} body={self.body!r}"


class SearchBackend(Protocol):
    """Request/response surface of a full-text search service.

    Implementations report HTTP-level rejections as unsuccessful responses and
    raise ``BackendTransportError`` when the request could not be completed.
    """

    async def index(
        self,
        index: str,
        document: dict[str, Any],
        document_key: Optional[str] = None,
    ) -> BackendResponse: ...

    async def delete_by_query(
        self,
        indices: Sequence[str],
        query: dict[str, Any],
    ) -> BackendResponse: ...

    async def close(self) -> None: ...

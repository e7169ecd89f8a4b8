"""Elasticsearch implementation of the search backend interface.

Notes:
    The official client raises ``ApiError`` for non-2xx responses. Those are
    turned back into unsuccessful ``BackendResponse`` values so that the store
    only has to look at one success flag.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Optional

import structlog
from elasticsearch import ApiError, AsyncElasticsearch, TransportError

from mail_fts.backend.base import BackendResponse
from mail_fts.config import Settings
from mail_fts.exceptions import BackendTransportError, ConfigurationError

logger = structlog.get_logger()


class ElasticsearchBackend:
    """Search backend talking to Elasticsearch through ``AsyncElasticsearch``."""

    def __init__(self, client: AsyncElasticsearch) -> None:
        self._client = client

    async def index(
        self,
        index: str,
        document: dict[str, Any],
        document_key: Optional[str] = None,
    ) -> BackendResponse:
        kwargs: dict[str, Any] = {"index": index, "document": document}
        if document_key is not None:
            kwargs["id"] = document_key
        return await self._send(self._client.index, **kwargs)

    async def delete_by_query(
        self,
        indices: Sequence[str],
        query: dict[str, Any],
    ) -> BackendResponse:
        # Collections that were never indexed have no index yet; skip them.
        return await self._send(
            self._client.delete_by_query,
            index=list(indices),
            query=query,
            ignore_unavailable=True,
            allow_no_indices=True,
        )

    async def close(self) -> None:
        await self._client.close()

    async def _send(self, method: Any, **kwargs: Any) -> BackendResponse:
        try:
            response = await method(**kwargs)
        except ApiError as exc:
            return BackendResponse(success=False, status=exc.meta.status, body=exc.body)
        except TransportError as exc:
            raise BackendTransportError(str(exc)) from exc

        status = response.meta.status
        return BackendResponse(success=200 <= status < 300, status=status, body=response.body)


def create_backend(settings: Settings) -> ElasticsearchBackend:
    """Build an Elasticsearch backend from application settings.

    Raises:
        ConfigurationError: If no Elasticsearch host is configured.
    """

    if not settings.elasticsearch_hosts:
        raise ConfigurationError("At least one Elasticsearch host must be configured")

    client_kwargs: dict[str, Any] = {
        "hosts": settings.elasticsearch_hosts,
        "verify_certs": settings.elasticsearch_verify_certs,
        "request_timeout": settings.request_timeout,
    }
    if settings.elasticsearch_api_key:
        client_kwargs["api_key"] = settings.elasticsearch_api_key
    elif settings.elasticsearch_username is not None:
        client_kwargs["basic_auth"] = (
            settings.elasticsearch_username,
            settings.elasticsearch_password,
        )
    if settings.elasticsearch_ca_certs is not None:
        client_kwargs["ca_certs"] = str(settings.elasticsearch_ca_certs)

    logger.info(
        "elasticsearch_backend_initialized",
        hosts=settings.elasticsearch_hosts,
        verify_certs=settings.elasticsearch_verify_certs,
    )
    return ElasticsearchBackend(AsyncElasticsearch(**client_kwargs))

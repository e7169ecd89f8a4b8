"""Search backend clients."""

from .base import BackendResponse, SearchBackend
from .elastic import ElasticsearchBackend, create_backend

__all__ = ["BackendResponse", "ElasticsearchBackend", "SearchBackend", "create_backend"]

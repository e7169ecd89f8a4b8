"""Custom exceptions for mail-fts."""

from __future__ import annotations


class MailFtsError(Exception):
    """Base exception for all mail-fts errors."""


class ConfigurationError(MailFtsError):
    """Exception raised for configuration related errors."""


class InvalidCollectionError(MailFtsError, ValueError):
    """Exception raised when a value does not name a known collection."""


class BackendTransportError(MailFtsError):
    """Exception raised when the search backend cannot be reached."""


class SearchBackendError(MailFtsError):
    """An operation against the search backend failed.

    Attributes:
        detail: Description of the backend response or transport failure.
    """

    def __init__(self, message: str, detail: str) -> None:
        super().__init__(f"{message}: {detail}")
        self.detail = detail


class DocumentIndexError(SearchBackendError):
    """Exception raised when indexing a document fails."""


class DocumentRemovalError(SearchBackendError):
    """Exception raised when a delete-by-query request fails."""

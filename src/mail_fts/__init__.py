"""mail-fts - full-text indexing adapter for mail servers.

This package projects classified message text into search documents and
keeps an Elasticsearch index in sync with the mail store: indexing single
documents and removing documents per account.
"""

__version__ = "0.1.0"

from mail_fts.config import Settings, get_settings
from mail_fts.projector import project
from mail_fts.store import FullTextStore

__all__ = ["FullTextStore", "Settings", "get_settings", "project", "__version__"]

"""Configuration management for mail-fts.

This module handles application configuration using Pydantic settings.
Configuration can be loaded from environment variables or .env files.
"""

import re
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_INDEX_PREFIX_RE = re.compile(r"^[a-z0-9][a-z0-9_-]*$")


class Settings(BaseSettings):
    """Application settings with environment variable support.

    All settings can be overridden via environment variables with
    the MAIL_FTS_ prefix (e.g., MAIL_FTS_INDEX_PREFIX).
    """

    model_config = SettingsConfigDict(
        env_prefix="MAIL_FTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Elasticsearch connection
    elasticsearch_hosts: list[str] = Field(
        default_factory=lambda: ["http://localhost:9200"],
        description="Elasticsearch node URLs (JSON list when set from the environment)",
    )
    elasticsearch_username: Optional[str] = Field(
        default=None,
        description="Username for HTTP basic authentication",
    )
    elasticsearch_password: Optional[str] = Field(
        default=None,
        description="Password for HTTP basic authentication",
    )
    elasticsearch_api_key: Optional[str] = Field(
        default=None,
        description="Encoded API key, used instead of basic authentication",
    )
    elasticsearch_verify_certs: bool = Field(
        default=True,
        description="Verify TLS certificates of the Elasticsearch nodes",
    )
    elasticsearch_ca_certs: Optional[Path] = Field(
        default=None,
        description="Path to a CA bundle used to verify the Elasticsearch nodes",
    )
    request_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Timeout for Elasticsearch requests in seconds",
    )

    # Index layout
    index_prefix: str = Field(
        default="mail_fts",
        description="Prefix of the per-collection index names",
    )
    deterministic_ids: bool = Field(
        default=True,
        description=(
            "Derive the backend document key from account, collection and document id "
            "so re-indexing a document replaces the previous copy."
        ),
    )

    # Application Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )

    @field_validator("index_prefix")
    @classmethod
    def _check_index_prefix(cls, value: str) -> str:
        # Elasticsearch index names must be lower case and cannot start with - or _.
        if not _INDEX_PREFIX_RE.match(value):
            raise ValueError(
                "index_prefix must be lower case letters, digits, '_' or '-' "
                "and start with a letter or digit"
            )
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level

    @model_validator(mode="after")
    def _check_credentials(self) -> "Settings":
        if (self.elasticsearch_username is None) != (self.elasticsearch_password is None):
            raise ValueError("elasticsearch_username and elasticsearch_password must be set together")
        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Returns:
        Settings: Application settings instance.
    """
    return Settings()

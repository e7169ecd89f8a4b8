"""Unit tests for configuration module."""

import pytest
from pydantic import ValidationError

from mail_fts.config import Settings, get_settings


class TestSettings:
    """Test suite for Settings class."""

    def test_default_settings(self) -> None:
        """Test that default settings are properly initialized."""
        settings = Settings()

        assert settings.elasticsearch_hosts == ["http://localhost:9200"]
        assert settings.index_prefix == "mail_fts"
        assert settings.deterministic_ids is True
        assert settings.request_timeout == 30.0
        assert settings.log_level == "INFO"
        assert settings.debug is False

    def test_settings_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test loading settings from environment variables."""
        monkeypatch.setenv("MAIL_FTS_ELASTICSEARCH_HOSTS", '["http://es1:9200", "http://es2:9200"]')
        monkeypatch.setenv("MAIL_FTS_INDEX_PREFIX", "stalwart")
        monkeypatch.setenv("MAIL_FTS_LOG_LEVEL", "debug")
        monkeypatch.setenv("MAIL_FTS_DETERMINISTIC_IDS", "false")

        # Clear the cache to ensure fresh settings
        get_settings.cache_clear()

        settings = get_settings()

        assert settings.elasticsearch_hosts == ["http://es1:9200", "http://es2:9200"]
        assert settings.index_prefix == "stalwart"
        assert settings.log_level == "DEBUG"
        assert settings.deterministic_ids is False

        # Clean up
        get_settings.cache_clear()

    def test_get_settings_returns_cached_instance(self) -> None:
        """Test that get_settings returns the same cached instance."""
        get_settings.cache_clear()

        settings1 = get_settings()
        settings2 = get_settings()

        assert settings1 is settings2

        # Clean up
        get_settings.cache_clear()

    @pytest.mark.parametrize("prefix", ["Mail", "_mail", "mail fts", ""])
    def test_invalid_index_prefix(self, prefix: str) -> None:
        """Test that prefixes Elasticsearch would reject are refused."""
        with pytest.raises(ValidationError):
            Settings(index_prefix=prefix)

    def test_invalid_log_level(self) -> None:
        """Test that unknown log levels are refused."""
        with pytest.raises(ValidationError):
            Settings(log_level="verbose")

    def test_username_requires_password(self) -> None:
        """Test that basic auth needs both username and password."""
        with pytest.raises(ValidationError):
            Settings(elasticsearch_username="elastic")

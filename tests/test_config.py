"""Tests for settings loading."""

import dataclasses

import pytest

from dtcentre.core.config import DEFAULT_DATABASE_URL, Settings


class TestSettingsFromEnv:
    """Test Settings.from_env."""

    def test_defaults(self):
        """An empty environment gives the defaults."""
        settings = Settings.from_env({})
        assert settings == Settings()
        assert settings.database_url == DEFAULT_DATABASE_URL
        assert settings.date_column == "date_infraction"
        assert settings.agent_column == "agent_nom"
        assert settings.default_limit == 100
        assert settings.max_limit is None
        assert settings.port == 3000

    def test_reads_variables(self):
        """Each variable overrides its setting."""
        settings = Settings.from_env(
            {
                "DTCENTRE_DATABASE_URL": "postgresql://u:p@db/pv",
                "DTCENTRE_DB_SCHEMA": "public",
                "DTCENTRE_DATE_COLUMN": "date_pv",
                "DTCENTRE_AGENT_COLUMN": "agent",
                "DTCENTRE_DEFAULT_LIMIT": "50",
                "DTCENTRE_MAX_LIMIT": "500",
                "DTCENTRE_QUERY_TIMEOUT": "2.5",
                "PORT": "8080",
                "DTCENTRE_LOG_LEVEL": "debug",
            }
        )
        assert settings.database_url == "postgresql://u:p@db/pv"
        assert settings.db_schema == "public"
        assert settings.date_column == "date_pv"
        assert settings.agent_column == "agent"
        assert settings.default_limit == 50
        assert settings.max_limit == 500
        assert settings.query_timeout == 2.5
        assert settings.port == 8080
        assert settings.log_level == "DEBUG"

    def test_database_url_fallback(self):
        """DATABASE_URL is used when the prefixed variable is unset."""
        settings = Settings.from_env({"DATABASE_URL": "postgresql://db/fallback"})
        assert settings.database_url == "postgresql://db/fallback"

    def test_prefixed_database_url_wins(self):
        """DTCENTRE_DATABASE_URL takes precedence."""
        settings = Settings.from_env(
            {"DATABASE_URL": "postgresql://db/a", "DTCENTRE_DATABASE_URL": "postgresql://db/b"}
        )
        assert settings.database_url == "postgresql://db/b"

    def test_settings_are_frozen(self):
        """Settings cannot be changed after startup."""
        settings = Settings()
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.port = 1

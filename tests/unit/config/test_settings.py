"""
Unit tests for application settings.
"""

import pytest
from pydantic import ValidationError

from appointment_manager.config import settings as settings_module
from appointment_manager.config.settings import Settings, get_settings


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


@pytest.mark.unit
class TestDatabaseUrl:
    def test_without_password(self):
        settings = _settings(DB_HOST="db", DB_PORT=5433, DB_NAME="clinic", DB_USER="app")

        assert settings.database_url == "postgresql+asyncpg://app@db:5433/clinic"

    def test_credentials_are_escaped(self):
        settings = _settings(DB_USER="app user", DB_PASSWORD="p@ss:word/1")

        assert settings.database_url.startswith("postgresql+asyncpg://app+user:p%40ss%3Aword%2F1@")


@pytest.mark.unit
class TestCorsOrigins:
    def test_wildcard_by_default(self):
        assert _settings().cors_origins == ["*"]

    def test_comma_separated(self):
        settings = _settings(CORS_ALLOWED_ORIGINS="https://a.example, https://b.example ,")

        assert settings.cors_origins == ["https://a.example", "https://b.example"]

    def test_blank_falls_back_to_wildcard(self):
        assert _settings(CORS_ALLOWED_ORIGINS=" , ").cors_origins == ["*"]


@pytest.mark.unit
class TestValidators:
    def test_log_level_is_upper_cased(self):
        assert _settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"

    def test_pool_size_must_be_positive(self):
        with pytest.raises(ValidationError, match="DB_POOL_SIZE must be at least 1"):
            _settings(DB_POOL_SIZE=0)

    def test_overflow_cannot_be_negative(self):
        with pytest.raises(ValidationError, match="DB_MAX_OVERFLOW cannot be negative"):
            _settings(DB_MAX_OVERFLOW=-1)

    @pytest.mark.parametrize(
        "environment,debug,expected",
        [
            ("development", False, True),
            ("Local", False, True),
            ("production", False, False),
            ("production", True, True),
        ],
    )
    def test_is_development(self, environment, debug, expected):
        assert _settings(ENVIRONMENT=environment, DEBUG=debug).is_development is expected


@pytest.mark.unit
class TestGetSettings:
    def test_is_cached(self, monkeypatch):
        monkeypatch.setattr(settings_module, "_settings_instance", None)

        assert get_settings() is get_settings()

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setattr(settings_module, "_settings_instance", None)
        monkeypatch.setenv("MAX_PAGE_SIZE", "25")

        assert get_settings().MAX_PAGE_SIZE == 25

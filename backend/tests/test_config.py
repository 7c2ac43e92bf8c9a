"""
Rollcall Backend — Settings Tests
=================================
"""

import pytest
from pydantic import ValidationError

from rollcall.config import Settings


def make_settings(**overrides) -> Settings:
    # _env_file=None keeps a developer's local .env out of the tests
    return Settings(_env_file=None, **overrides)


class TestSettings:

    def test_log_level_normalized(self):
        assert make_settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValidationError):
            make_settings(log_level="chatty")

    def test_cors_origins_list(self):
        s = make_settings(cors_origins="http://a.test, http://b.test,")
        assert s.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_is_sqlite(self):
        assert make_settings(database_url="sqlite+aiosqlite:///./x.db").is_sqlite
        assert not make_settings(
            database_url="postgresql+asyncpg://u:p@localhost/db"
        ).is_sqlite

    def test_rate_limit_bounds(self):
        with pytest.raises(ValidationError):
            make_settings(rate_limit_requests=1)


class TestProductionValidation:

    def test_valid_configuration_passes(self):
        make_settings(
            database_url="postgresql+asyncpg://u:p@localhost/db",
            cors_origins="https://app.example.com",
        ).validate_required_for_production()

    def test_sync_driver_rejected(self):
        s = make_settings(database_url="postgresql://u:p@localhost/db")
        with pytest.raises(ValueError, match="async driver"):
            s.validate_required_for_production()

    def test_wildcard_cors_rejected(self):
        s = make_settings(
            database_url="sqlite+aiosqlite:///./x.db",
            cors_origins="*",
        )
        with pytest.raises(ValueError, match="CORS_ORIGINS"):
            s.validate_required_for_production()

    def test_all_problems_reported_together(self):
        s = make_settings(database_url="sqlite:///./x.db", cors_origins="*")
        with pytest.raises(ValueError) as exc_info:
            s.validate_required_for_production()
        assert "DATABASE_URL" in str(exc_info.value)
        assert "CORS_ORIGINS" in str(exc_info.value)

"""Unit tests for Settings validation."""

import pytest
from pydantic import ValidationError

from postboard.core.config import Settings
from postboard.core.enums import Environment

REQUIRED = {
    "database_url": "sqlite+aiosqlite:///./x.db",
    "redis_url": "redis://localhost:6379/0",
    "secret_key": "x" * 32,
}


@pytest.mark.unit
class TestSettings:
    def test_defaults(self):
        settings = Settings(**REQUIRED, environment=Environment.DEVELOPMENT)

        assert settings.access_token_expire_minutes == 20
        assert settings.refresh_token_expire_days == 7
        assert settings.access_token_cache_ttl_seconds == 12000
        assert settings.db_pool_size == 5
        assert settings.db_pool_size + settings.db_max_overflow == 50
        assert settings.is_development

    def test_short_secret_rejected(self):
        with pytest.raises(ValidationError, match="secret_key"):
            Settings(**{**REQUIRED, "secret_key": "too-short"})

    def test_missing_secret_rejected(self, monkeypatch):
        monkeypatch.delenv("SECRET_KEY", raising=False)
        fields = {k: v for k, v in REQUIRED.items() if k != "secret_key"}

        with pytest.raises(ValidationError):
            Settings(**fields)

    @pytest.mark.parametrize("rounds", [3, 32])
    def test_bcrypt_rounds_range(self, rounds):
        with pytest.raises(ValidationError):
            Settings(**REQUIRED, bcrypt_rounds=rounds)

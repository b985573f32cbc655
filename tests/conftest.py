"""Pytest configuration and shared fixtures.

Environment variables are set before anything imports ``postboard`` so the
module-level FastAPI apps can build their settings. Tests never touch a real
PostgreSQL or Redis:

- Database: SQLite file per test (aiosqlite)
- Cache: fakeredis (in-memory Redis emulation)
"""

import inspect
import os
from unittest.mock import Mock

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./postboard-test.db")
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/15")
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-long-enough-0123")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import fakeredis.aioredis  # noqa: E402
import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402

from postboard.infrastructure.cache import (  # noqa: E402
    RedisAccessTokenCache,
    RedisAdapter,
)
from postboard.infrastructure.persistence.database import Database  # noqa: E402
from postboard.infrastructure.security import JWTTokenCodec  # noqa: E402
from tests.factories import TEST_SECRET_KEY  # noqa: E402


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with fakeredis and SQLite"
    )
    config.addinivalue_line("markers", "api: API tests through FastAPI TestClient")


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def mock_logger():
    """Logger double satisfying LoggerProtocol."""
    return Mock()


@pytest.fixture
def token_codec():
    """Real JWT codec with a test secret."""
    return JWTTokenCodec(secret_key=TEST_SECRET_KEY)


@pytest.fixture
def redis_client():
    """Fresh fakeredis client per test (no shared state between tests)."""
    return fakeredis.aioredis.FakeRedis(server=fakeredis.FakeServer())


@pytest.fixture
def cache_adapter(redis_client):
    return RedisAdapter(redis_client=redis_client)


@pytest.fixture
def access_token_cache(cache_adapter, mock_logger):
    return RedisAccessTokenCache(cache=cache_adapter, logger=mock_logger)


@pytest_asyncio.fixture
async def database(tmp_path):
    """SQLite database with all tables created, disposed after the test."""
    db = Database(database_url=f"sqlite+aiosqlite:///{tmp_path / 'postboard.db'}")
    await db.create_all()
    yield db
    await db.close()

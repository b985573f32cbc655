"""Integration tests for RedisAdapter and the access token cache.

Uses fakeredis so Redis semantics (TTL, missing keys) are real without a
server. Backend failures are simulated with a client whose commands raise.
"""

from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from postboard.core.enums import ErrorCode
from postboard.core.result import Failure, Success
from postboard.infrastructure.cache import (
    ACCESS_TOKEN_KEY,
    RedisAccessTokenCache,
    RedisAdapter,
)
from postboard.infrastructure.enums import InfrastructureErrorCode
from postboard.infrastructure.errors import CacheError


def broken_redis() -> AsyncMock:
    client = AsyncMock()
    error = RedisConnectionError("connection refused")
    client.get.side_effect = error
    client.set.side_effect = error
    client.setex.side_effect = error
    client.delete.side_effect = error
    client.ping.side_effect = error
    return client


@pytest.mark.integration
class TestRedisAdapter:
    async def test_set_then_get(self, cache_adapter):
        await cache_adapter.set("greeting", "hello")

        result = await cache_adapter.get("greeting")

        assert result == Success(value="hello")

    async def test_get_missing_key_is_none(self, cache_adapter):
        assert await cache_adapter.get("absent") == Success(value=None)

    async def test_set_with_ttl_expires(self, cache_adapter, redis_client):
        await cache_adapter.set("short", "lived", ttl=30)

        ttl = await redis_client.ttl("short")

        assert 0 < ttl <= 30

    async def test_delete_reports_whether_key_existed(self, cache_adapter):
        await cache_adapter.set("k", "v")

        assert await cache_adapter.delete("k") == Success(value=True)
        assert await cache_adapter.delete("k") == Success(value=False)

    async def test_ping(self, cache_adapter):
        assert await cache_adapter.ping() == Success(value=True)

    async def test_backend_errors_map_to_cache_error(self):
        adapter = RedisAdapter(redis_client=broken_redis())

        for result, infrastructure_code in (
            (await adapter.get("k"), InfrastructureErrorCode.CACHE_GET_ERROR),
            (await adapter.set("k", "v"), InfrastructureErrorCode.CACHE_SET_ERROR),
            (await adapter.delete("k"), InfrastructureErrorCode.CACHE_DELETE_ERROR),
            (await adapter.ping(), InfrastructureErrorCode.CACHE_CONNECTION_ERROR),
        ):
            assert isinstance(result, Failure)
            assert isinstance(result.error, CacheError)
            assert result.error.code == ErrorCode.CACHE_UNAVAILABLE
            assert result.error.infrastructure_code == infrastructure_code
            assert not result.error.is_miss


@pytest.mark.integration
class TestRedisAccessTokenCache:
    async def test_get_on_empty_slot_is_miss(self, access_token_cache):
        result = await access_token_cache.get()

        assert isinstance(result, Failure)
        assert result.error.is_miss

    async def test_set_then_get(self, access_token_cache):
        await access_token_cache.set("token-a")

        assert await access_token_cache.get() == Success(value="token-a")

    async def test_slot_uses_fixed_key_and_default_ttl(
        self, access_token_cache, redis_client
    ):
        await access_token_cache.set("token-a")

        assert await redis_client.get(ACCESS_TOKEN_KEY) == b"token-a"
        ttl = await redis_client.ttl(ACCESS_TOKEN_KEY)
        assert 11990 < ttl <= 12000

    async def test_replace_overwrites_previous_token(self, access_token_cache):
        """One slot for everyone: the last writer wins."""
        await access_token_cache.replace("token-for-alice")
        await access_token_cache.replace("token-for-bob")

        assert await access_token_cache.get() == Success(value="token-for-bob")

    async def test_delete_clears_slot(self, access_token_cache):
        await access_token_cache.set("token-a")

        await access_token_cache.delete()

        result = await access_token_cache.get()
        assert isinstance(result, Failure)
        assert result.error.is_miss

    async def test_delete_on_empty_slot_is_silent(self, access_token_cache):
        await access_token_cache.delete()

    async def test_backend_down_get_is_not_a_miss(self, mock_logger):
        cache = RedisAccessTokenCache(
            cache=RedisAdapter(redis_client=broken_redis()), logger=mock_logger
        )

        result = await cache.get()

        assert isinstance(result, Failure)
        assert not result.error.is_miss
        mock_logger.error.assert_called_once()

    async def test_backend_down_delete_is_swallowed_but_set_fails(self, mock_logger):
        cache = RedisAccessTokenCache(
            cache=RedisAdapter(redis_client=broken_redis()), logger=mock_logger
        )

        result = await cache.replace("token-a")

        assert isinstance(result, Failure)
        mock_logger.warning.assert_called_once()
        mock_logger.error.assert_called_once()

    async def test_replace_ignores_delete_failure(self, mock_logger):
        client = AsyncMock()
        client.delete.side_effect = RedisConnectionError("flaky")
        client.setex.return_value = True
        cache = RedisAccessTokenCache(
            cache=RedisAdapter(redis_client=client), logger=mock_logger, ttl_seconds=60
        )

        result = await cache.replace("token-a")

        assert result == Success(value=None)
        client.setex.assert_awaited_once_with(ACCESS_TOKEN_KEY, 60, "token-a")

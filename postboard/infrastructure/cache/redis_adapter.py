"""Redis implementation of ``CacheProtocol``.

Values are stored as UTF-8 strings. Every ``RedisError`` is caught here and
returned as a ``CacheError`` with ``CACHE_UNAVAILABLE``, so nothing above this
adapter ever sees a redis-py exception.
"""

from redis.asyncio import Redis
from redis.exceptions import RedisError

from postboard.core.enums import ErrorCode
from postboard.core.result import Failure, Result, Success
from postboard.infrastructure.enums import InfrastructureErrorCode
from postboard.infrastructure.errors import CacheError


def _unavailable(
    reason: InfrastructureErrorCode, message: str, exc: RedisError, **details: object
) -> Failure[CacheError]:
    return Failure(
        error=CacheError(
            code=ErrorCode.CACHE_UNAVAILABLE,
            infrastructure_code=reason,
            message=message,
            details={**details, "error": str(exc)},
        )
    )


class RedisAdapter:
    """Key/value operations over an async Redis client.

    Args:
        redis_client: Client bound to the process-wide connection pool.
    """

    def __init__(self, redis_client: Redis) -> None:
        self._redis = redis_client

    async def get(self, key: str) -> Result[str | None, CacheError]:
        """Return the stored string, or ``Success(None)`` when the key is absent."""
        try:
            value = await self._redis.get(key)
        except RedisError as e:
            return _unavailable(
                InfrastructureErrorCode.CACHE_GET_ERROR,
                f"Failed to read '{key}' from cache",
                e,
                key=key,
            )
        if isinstance(value, bytes):
            value = value.decode("utf-8")
        return Success(value=value)

    async def set(
        self,
        key: str,
        value: str,
        ttl: int | None = None,
    ) -> Result[None, CacheError]:
        """Store ``value``, expiring after ``ttl`` seconds when given."""
        try:
            if ttl is None:
                await self._redis.set(key, value)
            else:
                await self._redis.setex(key, ttl, value)
        except RedisError as e:
            return _unavailable(
                InfrastructureErrorCode.CACHE_SET_ERROR,
                f"Failed to write '{key}' to cache",
                e,
                key=key,
                ttl=ttl,
            )
        return Success(value=None)

    async def delete(self, key: str) -> Result[bool, CacheError]:
        """Remove ``key``. The value is False when there was nothing to remove."""
        try:
            removed = await self._redis.delete(key)
        except RedisError as e:
            return _unavailable(
                InfrastructureErrorCode.CACHE_DELETE_ERROR,
                f"Failed to delete '{key}' from cache",
                e,
                key=key,
            )
        return Success(value=removed > 0)

    async def ping(self) -> Result[bool, CacheError]:
        try:
            return Success(value=bool(await self._redis.ping()))
        except RedisError as e:
            return _unavailable(
                InfrastructureErrorCode.CACHE_CONNECTION_ERROR, "Redis ping failed", e
            )

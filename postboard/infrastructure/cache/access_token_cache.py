"""Single-slot access token cache on top of CacheProtocol.

The slot lives under one fixed key shared by every user. A login or refresh
overwrites it, so only the most recently issued access token is accepted by
the identity verifier. Do not turn this into a per-user key: the verifier
reads the slot without knowing who is calling.
"""

from postboard.core.enums import ErrorCode
from postboard.core.errors import DomainError
from postboard.core.result import Failure, Result, Success
from postboard.domain.protocols import CacheProtocol, LoggerProtocol
from postboard.infrastructure.enums import InfrastructureErrorCode
from postboard.infrastructure.errors import CacheError

ACCESS_TOKEN_KEY = "access_token"
DEFAULT_ACCESS_TOKEN_TTL_SECONDS = 12000


class RedisAccessTokenCache:
    """AccessTokenCacheProtocol implementation.

    Args:
        cache: Key/value cache (RedisAdapter in production).
        logger: Structured logger.
        ttl_seconds: Expiry applied on every write.
        key: Slot key. Fixed for the whole process.
    """

    def __init__(
        self,
        cache: CacheProtocol,
        logger: LoggerProtocol,
        ttl_seconds: int = DEFAULT_ACCESS_TOKEN_TTL_SECONDS,
        key: str = ACCESS_TOKEN_KEY,
    ) -> None:
        self._cache = cache
        self._logger = logger
        self._ttl = ttl_seconds
        self._key = key

    async def set(self, token: str) -> Result[None, DomainError]:
        result = await self._cache.set(self._key, token, ttl=self._ttl)
        if isinstance(result, Failure):
            self._logger.error(
                "Access token cache write failed",
                cache_key=self._key,
                reason=result.error.message,
            )
        return result

    async def get(self) -> Result[str, DomainError]:
        """Read the current slot.

        Returns:
            Success(token), or Failure(CacheError) with ``CACHE_MISS`` when the
            slot is empty, or the backend error.
        """
        match await self._cache.get(self._key):
            case Success(value=str() as token) if token:
                return Success(value=token)
            case Success():
                return Failure(
                    error=CacheError(
                        code=ErrorCode.TOKEN_INVALID,
                        infrastructure_code=InfrastructureErrorCode.CACHE_MISS,
                        message="No access token cached",
                        details={"key": self._key},
                    )
                )
            case Failure(error=error):
                self._logger.error(
                    "Access token cache read failed",
                    cache_key=self._key,
                    reason=error.message,
                )
                return Failure(error=error)
            case _:
                # Unreachable but needed for type checker
                raise AssertionError("unexpected cache result")

    async def delete(self) -> None:
        result = await self._cache.delete(self._key)
        if isinstance(result, Failure):
            # Non-fatal: the slot is about to be overwritten anyway.
            self._logger.warning(
                "Access token cache delete failed",
                cache_key=self._key,
                reason=result.error.message,
            )

    async def replace(self, token: str) -> Result[None, DomainError]:
        """Delete the previous token, then store ``token``.

        The delete outcome is ignored; only the set result is returned.
        """
        await self.delete()
        return await self.set(token)

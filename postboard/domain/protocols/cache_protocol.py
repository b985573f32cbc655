"""Key/value cache port.

``RedisAccessTokenCache`` is written against this port rather than redis-py,
so it can be unit tested with an ``AsyncMock`` and run against fakeredis
through ``RedisAdapter``.
"""

from typing import Protocol

from postboard.core.errors import DomainError
from postboard.core.result import Result


class CacheProtocol(Protocol):
    """String values under string keys, with optional expiry."""

    async def get(self, key: str) -> Result[str | None, DomainError]:
        """``Success(None)`` for an absent key; failures are backend faults only."""
        ...

    async def set(
        self,
        key: str,
        value: str,
        ttl: int | None = None,
    ) -> Result[None, DomainError]:
        """Store ``value``; ``ttl`` in seconds, None keeps it until deleted."""
        ...

    async def delete(self, key: str) -> Result[bool, DomainError]:
        """``Success(False)`` when the key did not exist."""
        ...

    async def ping(self) -> Result[bool, DomainError]: ...

"""Single-slot access token cache protocol.

Exactly one logical slot exists process-wide: the key is a fixed constant,
not per-user. Writing a new token invalidates the previous one regardless of
which user it belonged to, so at most one access token is live at a time.
Concurrent writers race and the last writer wins.
"""

from typing import Protocol

from postboard.core.errors import DomainError
from postboard.core.result import Result


class AccessTokenCacheProtocol(Protocol):
    """Holds the current access token string."""

    async def set(self, token: str) -> Result[None, DomainError]:
        """Store ``token`` in the slot with the configured TTL.

        Fails only when the cache backend is unavailable.
        """
        ...

    async def get(self) -> Result[str, DomainError]:
        """Read the slot.

        Returns:
            Success with the token, or Failure with a CacheError whose
            ``is_miss`` is True when the slot is empty or expired.
        """
        ...

    async def delete(self) -> None:
        """Best-effort clear of the slot.

        A missing key counts as success. Backend failures are logged and
        swallowed because the delete always precedes a replacement write.
        """
        ...

    async def replace(self, token: str) -> Result[None, DomainError]:
        """Delete then set. Only the set outcome is reported."""
        ...

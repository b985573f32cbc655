"""RefreshTokenRepository protocol (port) for domain layer.

Durable record linking a refresh token string to the user it was issued to.
Records are only inserted and matched by exact string; they are never mutated
and no deletion path exists.
"""

from typing import Protocol
from uuid import UUID

from postboard.core.errors import DomainError
from postboard.core.result import Result


class RefreshTokenRepository(Protocol):
    """Protocol for refresh token persistence operations.

    Token Lifecycle:
        1. Inserted during login (one user may hold many live records)
        2. Matched during access token refresh
    """

    async def insert(self, token: str, owner_id: UUID) -> Result[None, DomainError]:
        """Append a record. Duplicate inserts are not an error.

        Args:
            token: Signed refresh token string.
            owner_id: Owning user's ID.

        Returns:
            Success(None), or Failure(DatabaseError) when the store is down.
        """
        ...

    async def find(self, token: str, owner_id: UUID) -> Result[UUID, DomainError]:
        """Match a record on both token string and owner.

        Returns:
            Success(owner_id) on an exact match, Failure(NotFoundError) when
            no row matches, Failure(DatabaseError) on a store fault.
        """
        ...

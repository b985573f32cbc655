"""UserRepository protocol (port) for domain layer."""

from typing import Protocol
from uuid import UUID

from postboard.core.errors import DomainError
from postboard.core.result import Result
from postboard.domain.entities import UserRecord


class UserRepository(Protocol):
    """Lookup and creation of canonical user records.

    Lookups return ``Success(None)`` when no row matches; store faults are
    ``Failure(DatabaseError)``.
    """

    async def find_by_id(self, user_id: UUID) -> Result[UserRecord | None, DomainError]:
        """Find user by ID."""
        ...

    async def find_by_email(self, email: str) -> Result[UserRecord | None, DomainError]:
        """Find user by email (case-insensitive)."""
        ...

    async def find_by_username(
        self, username: str
    ) -> Result[UserRecord | None, DomainError]:
        """Find user by username (exact match)."""
        ...

    async def create(
        self, username: str, email: str, password_hash: str
    ) -> Result[UserRecord, DomainError]:
        """Insert a new user.

        Returns:
            Success(UserRecord), Failure(ConflictError) on duplicate
            email/username, or Failure(DatabaseError).
        """
        ...

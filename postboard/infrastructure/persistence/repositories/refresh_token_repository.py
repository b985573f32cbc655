"""RefreshTokenRepository - SQLAlchemy implementation for refresh token persistence."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from postboard.core.enums import ErrorCode
from postboard.core.errors import DomainError, NotFoundError
from postboard.core.result import Failure, Result, Success
from postboard.infrastructure.persistence.errors import to_database_error
from postboard.infrastructure.persistence.models import RefreshToken


class RefreshTokenRepository:
    """SQLAlchemy implementation of the refresh token store.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = RefreshTokenRepository(session)
        ...     result = await repo.find(token, owner_id)
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def insert(self, token: str, owner_id: UUID) -> Result[None, DomainError]:
        """Persist a refresh token and commit immediately.

        The commit happens here so the record is durable before the caller
        goes on to issue an access token.

        Args:
            token: Signed refresh token string.
            owner_id: User the token was issued to.

        Returns:
            Success(None), or Failure(DatabaseError).
        """
        try:
            self.session.add(RefreshToken(owner_id=owner_id, token=token))
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            return Failure(error=to_database_error("refresh_token.insert", e))
        return Success(value=None)

    async def find(self, token: str, owner_id: UUID) -> Result[UUID, DomainError]:
        """Match a record on exact token string and owner.

        Returns:
            Success(owner_id), Failure(NotFoundError) if no row matches, or
            Failure(DatabaseError).
        """
        stmt = (
            select(RefreshToken.owner_id)
            .where(RefreshToken.owner_id == owner_id)
            .where(RefreshToken.token == token)
            .limit(1)
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            return Failure(error=to_database_error("refresh_token.find", e))

        found = result.scalar_one_or_none()
        if found is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.REFRESH_TOKEN_NOT_FOUND,
                    message="Refresh token not on file",
                    resource_type="RefreshToken",
                    resource_id=str(owner_id),
                )
            )
        return Success(value=found)

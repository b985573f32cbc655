"""UserRepository - SQLAlchemy implementation of UserRepository protocol.

Maps between the ``User`` database model and the ``UserRecord`` entity.
"""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from postboard.core.enums import ErrorCode
from postboard.core.errors import ConflictError, DomainError
from postboard.core.result import Failure, Result, Success
from postboard.domain.entities import UserRecord
from postboard.infrastructure.persistence.errors import to_database_error
from postboard.infrastructure.persistence.models import User as UserModel


def _to_record(model: UserModel) -> UserRecord:
    return UserRecord(
        id=model.id,
        username=model.username,
        email=model.email,
        password_hash=model.password_hash,
    )


class UserRepository:
    """SQLAlchemy implementation of user persistence.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: UUID) -> Result[UserRecord | None, DomainError]:
        return await self._find_one(
            "user.find_by_id", select(UserModel).where(UserModel.id == user_id)
        )

    async def find_by_email(self, email: str) -> Result[UserRecord | None, DomainError]:
        """Find user by email (case-insensitive)."""
        stmt = select(UserModel).where(func.lower(UserModel.email) == email.lower())
        return await self._find_one("user.find_by_email", stmt)

    async def find_by_username(
        self, username: str
    ) -> Result[UserRecord | None, DomainError]:
        return await self._find_one(
            "user.find_by_username",
            select(UserModel).where(UserModel.username == username),
        )

    async def create(
        self, username: str, email: str, password_hash: str
    ) -> Result[UserRecord, DomainError]:
        """Insert a new user and commit.

        Returns:
            Success(UserRecord), Failure(ConflictError) when the email or
            username is taken, or Failure(DatabaseError).
        """
        model = UserModel(
            username=username,
            email=email.lower(),
            password_hash=password_hash,
        )
        try:
            self.session.add(model)
            await self.session.commit()
            await self.session.refresh(model)
        except IntegrityError:
            await self.session.rollback()
            return Failure(
                error=ConflictError(
                    code=ErrorCode.USER_ALREADY_EXISTS,
                    message="Email or username already registered",
                    resource_type="User",
                )
            )
        except SQLAlchemyError as e:
            await self.session.rollback()
            return Failure(error=to_database_error("user.create", e))
        return Success(value=_to_record(model))

    async def _find_one(
        self, operation: str, stmt
    ) -> Result[UserRecord | None, DomainError]:
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            return Failure(error=to_database_error(operation, e))
        model = result.scalar_one_or_none()
        return Success(value=_to_record(model) if model else None)

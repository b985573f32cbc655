"""PostRepository - SQLAlchemy implementation of PostRepository protocol."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from postboard.core.enums import ErrorCode
from postboard.core.errors import DomainError, NotFoundError
from postboard.core.result import Failure, Result, Success
from postboard.domain.entities import Post
from postboard.infrastructure.persistence.errors import to_database_error
from postboard.infrastructure.persistence.models import Post as PostModel


def _to_entity(model: PostModel) -> Post:
    return Post(
        id=model.id,
        user_id=model.user_id,
        username=model.username,
        title=model.title,
        content=model.content,
        created_at=model.created_at,
    )


def _not_found(post_id: UUID) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.POST_NOT_FOUND,
        message="Post not found",
        resource_type="Post",
        resource_id=str(post_id),
    )


class PostRepository:
    """SQLAlchemy implementation of post persistence.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_page(self, page: int, limit: int) -> Result[list[Post], DomainError]:
        """Return posts for a 1-based page, newest first.

        Args:
            page: Page number (values below 1 are treated as 1).
            limit: Page size.
        """
        offset = (max(page, 1) - 1) * limit
        stmt = (
            select(PostModel)
            .order_by(PostModel.created_at.desc(), PostModel.id)
            .offset(offset)
            .limit(limit)
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            return Failure(error=to_database_error("post.list_page", e))
        return Success(value=[_to_entity(m) for m in result.scalars().all()])

    async def find_by_id(self, post_id: UUID) -> Result[Post | None, DomainError]:
        try:
            model = await self.session.get(PostModel, post_id)
        except SQLAlchemyError as e:
            return Failure(error=to_database_error("post.find_by_id", e))
        return Success(value=_to_entity(model) if model else None)

    async def create(
        self, user_id: UUID, username: str, title: str, content: str
    ) -> Result[Post, DomainError]:
        model = PostModel(
            user_id=user_id, username=username, title=title, content=content
        )
        try:
            self.session.add(model)
            await self.session.commit()
            await self.session.refresh(model)
        except SQLAlchemyError as e:
            await self.session.rollback()
            return Failure(error=to_database_error("post.create", e))
        return Success(value=_to_entity(model))

    async def update(
        self, post_id: UUID, title: str | None, content: str | None
    ) -> Result[Post, DomainError]:
        """Apply a partial update. ``None`` fields are left unchanged."""
        try:
            model = await self.session.get(PostModel, post_id)
            if model is None:
                return Failure(error=_not_found(post_id))
            if title is not None:
                model.title = title
            if content is not None:
                model.content = content
            await self.session.commit()
            await self.session.refresh(model)
        except SQLAlchemyError as e:
            await self.session.rollback()
            return Failure(error=to_database_error("post.update", e))
        return Success(value=_to_entity(model))

    async def delete(self, post_id: UUID) -> Result[None, DomainError]:
        try:
            model = await self.session.get(PostModel, post_id)
            if model is None:
                return Failure(error=_not_found(post_id))
            await self.session.delete(model)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            return Failure(error=to_database_error("post.delete", e))
        return Success(value=None)

"""Post handler factories for the content RPC service.

The RPC server has no FastAPI dependency injection, so these take the
session explicitly. Callers own the session lifecycle.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from postboard.application.commands.handlers.post_handlers import (
    CreatePostHandler,
    DeletePostHandler,
    UpdatePostHandler,
)
from postboard.application.queries.handlers.post_query_handlers import (
    GetPostHandler,
    ListPostsHandler,
)
from postboard.core.container.infrastructure import get_logger
from postboard.infrastructure.persistence.repositories import PostRepository


def get_list_posts_handler(session: AsyncSession) -> ListPostsHandler:
    return ListPostsHandler(post_repo=PostRepository(session), logger=get_logger())


def get_get_post_handler(session: AsyncSession) -> GetPostHandler:
    return GetPostHandler(post_repo=PostRepository(session), logger=get_logger())


def get_create_post_handler(session: AsyncSession) -> CreatePostHandler:
    return CreatePostHandler(post_repo=PostRepository(session), logger=get_logger())


def get_update_post_handler(session: AsyncSession) -> UpdatePostHandler:
    return UpdatePostHandler(post_repo=PostRepository(session), logger=get_logger())


def get_delete_post_handler(session: AsyncSession) -> DeletePostHandler:
    return DeletePostHandler(post_repo=PostRepository(session), logger=get_logger())

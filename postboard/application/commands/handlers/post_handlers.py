"""Post command handlers.

Each handler receives an identity already verified by the RPC interceptor.
Update and delete are restricted to the post's owner.
"""

from postboard.application.commands.post_commands import (
    CreatePost,
    DeletePost,
    UpdatePost,
)
from postboard.core.errors import NotFoundError
from postboard.core.result import Failure, Result, Success
from postboard.domain.entities import Post
from postboard.domain.protocols import LoggerProtocol, PostRepository


class PostError:
    """Post operation error reasons."""

    NOT_FOUND = "post_not_found"
    PERMISSION_DENIED = "permission_denied"
    BACKEND_UNAVAILABLE = "backend_unavailable"


class CreatePostHandler:
    """Handler for CreatePost command."""

    def __init__(self, post_repo: PostRepository, logger: LoggerProtocol) -> None:
        self._post_repo = post_repo
        self._logger = logger

    async def handle(self, cmd: CreatePost) -> Result[Post, str]:
        result = await self._post_repo.create(
            cmd.author.id, cmd.author.username, cmd.title, cmd.content
        )
        match result:
            case Success(value=post):
                self._logger.info(
                    "Post created", post_id=str(post.id), user_id=str(cmd.author.id)
                )
                return Success(value=post)
            case Failure(error=error):
                self._logger.error("Post creation failed", reason=error.message)
                return Failure(error=PostError.BACKEND_UNAVAILABLE)
            case _:
                # Unreachable but needed for type checker
                return Failure(error=PostError.BACKEND_UNAVAILABLE)


class _OwnedPostHandler:
    """Shared owner check for update and delete."""

    def __init__(self, post_repo: PostRepository, logger: LoggerProtocol) -> None:
        self._post_repo = post_repo
        self._logger = logger

    async def _authorize(self, cmd: UpdatePost | DeletePost) -> str | None:
        """Return an error reason, or None when the caller owns the post."""
        match await self._post_repo.find_by_id(cmd.post_id):
            case Failure(error=error):
                self._logger.error("Post lookup failed", reason=error.message)
                return PostError.BACKEND_UNAVAILABLE
            case Success(value=None):
                return PostError.NOT_FOUND
            case Success(value=Post() as post) if not post.is_owned_by(cmd.author.id):
                self._logger.warning(
                    "Post change denied",
                    post_id=str(cmd.post_id),
                    user_id=str(cmd.author.id),
                )
                return PostError.PERMISSION_DENIED
        return None

    def _map_failure(self, error: object) -> str:
        if isinstance(error, NotFoundError):
            return PostError.NOT_FOUND
        self._logger.error("Post write failed", reason=str(error))
        return PostError.BACKEND_UNAVAILABLE


class UpdatePostHandler(_OwnedPostHandler):
    """Handler for UpdatePost command."""

    async def handle(self, cmd: UpdatePost) -> Result[Post, str]:
        denied = await self._authorize(cmd)
        if denied is not None:
            return Failure(error=denied)

        match await self._post_repo.update(cmd.post_id, cmd.title, cmd.content):
            case Success(value=post):
                self._logger.info("Post updated", post_id=str(post.id))
                return Success(value=post)
            case Failure(error=error):
                return Failure(error=self._map_failure(error))
            case _:
                # Unreachable but needed for type checker
                return Failure(error=PostError.BACKEND_UNAVAILABLE)


class DeletePostHandler(_OwnedPostHandler):
    """Handler for DeletePost command."""

    async def handle(self, cmd: DeletePost) -> Result[None, str]:
        denied = await self._authorize(cmd)
        if denied is not None:
            return Failure(error=denied)

        match await self._post_repo.delete(cmd.post_id):
            case Success():
                self._logger.info("Post deleted", post_id=str(cmd.post_id))
                return Success(value=None)
            case Failure(error=error):
                return Failure(error=self._map_failure(error))
            case _:
                # Unreachable but needed for type checker
                return Failure(error=PostError.BACKEND_UNAVAILABLE)

"""Post query handlers."""

from postboard.application.commands.handlers.post_handlers import PostError
from postboard.application.queries.post_queries import GetPost, ListPosts
from postboard.core.result import Failure, Result, Success
from postboard.domain.entities import Post
from postboard.domain.protocols import LoggerProtocol, PostRepository

MAX_PAGE_SIZE = 100


class ListPostsHandler:
    """Handler for ListPosts query."""

    def __init__(self, post_repo: PostRepository, logger: LoggerProtocol) -> None:
        self._post_repo = post_repo
        self._logger = logger

    async def handle(self, query: ListPosts) -> Result[list[Post], str]:
        limit = min(max(query.limit, 1), MAX_PAGE_SIZE)
        match await self._post_repo.list_page(max(query.page, 1), limit):
            case Success(value=posts):
                return Success(value=posts)
            case Failure(error=error):
                self._logger.error("Post listing failed", reason=error.message)
                return Failure(error=PostError.BACKEND_UNAVAILABLE)
            case _:
                # Unreachable but needed for type checker
                return Failure(error=PostError.BACKEND_UNAVAILABLE)


class GetPostHandler:
    """Handler for GetPost query."""

    def __init__(self, post_repo: PostRepository, logger: LoggerProtocol) -> None:
        self._post_repo = post_repo
        self._logger = logger

    async def handle(self, query: GetPost) -> Result[Post, str]:
        match await self._post_repo.find_by_id(query.post_id):
            case Success(value=Post() as post):
                return Success(value=post)
            case Success():
                return Failure(error=PostError.NOT_FOUND)
            case Failure(error=error):
                self._logger.error("Post lookup failed", reason=error.message)
                return Failure(error=PostError.BACKEND_UNAVAILABLE)
            case _:
                # Unreachable but needed for type checker
                return Failure(error=PostError.BACKEND_UNAVAILABLE)

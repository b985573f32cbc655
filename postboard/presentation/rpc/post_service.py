"""Post RPC servicer.

Methods take and return JSON-object messages:

    GetAllPost   {page, limits}            -> {page, limits, posts: [...]}
    GetPostById  {post_id}                 -> {post: {...}}
    CreatePost   {title, content}          -> {post: {...}}
    UpdatePost   {post_id, title?, content?} -> {post: {...}}
    DeletePost   {post_id}                 -> {message}

Protected methods read the caller from ``current_identity``, populated by
``IdentityInterceptor``.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any, NoReturn
from uuid import UUID

import grpc
from sqlalchemy.ext.asyncio import AsyncSession

from postboard.application.commands.handlers.post_handlers import PostError
from postboard.application.commands.post_commands import (
    CreatePost,
    DeletePost,
    UpdatePost,
)
from postboard.application.queries.post_queries import GetPost, ListPosts
from postboard.core.container import (
    get_create_post_handler,
    get_delete_post_handler,
    get_get_post_handler,
    get_list_posts_handler,
    get_update_post_handler,
)
from postboard.core.result import Failure, Success
from postboard.domain.entities import Identity
from postboard.presentation.rpc.interceptor import (
    UNAUTHORIZED_MESSAGE,
    get_current_identity,
)
from postboard.presentation.rpc.messages import (
    CREATE_POST,
    DELETE_POST,
    GET_ALL_POST,
    GET_POST_BY_ID,
    POST_SERVICE,
    PROTECTED_POST_SERVICE,
    UPDATE_POST,
    deserialize,
    post_to_message,
    serialize,
)

SessionFactory = Callable[[], AbstractAsyncContextManager[AsyncSession]]

_POST_ERROR_TO_STATUS: dict[str, tuple[grpc.StatusCode, str]] = {
    PostError.NOT_FOUND: (grpc.StatusCode.NOT_FOUND, "Post not found"),
    PostError.PERMISSION_DENIED: (
        grpc.StatusCode.PERMISSION_DENIED,
        "Only the author can change this post",
    ),
    PostError.BACKEND_UNAVAILABLE: (
        grpc.StatusCode.UNAVAILABLE,
        "Post store unavailable",
    ),
}


async def _abort(
    context: grpc.aio.ServicerContext, code: grpc.StatusCode, message: str
) -> NoReturn:
    await context.abort(code, message)
    # abort() always raises inside a live server
    raise RuntimeError(message)


async def _abort_with(context: grpc.aio.ServicerContext, error: str) -> NoReturn:
    code, message = _POST_ERROR_TO_STATUS.get(
        error, (grpc.StatusCode.INTERNAL, "Post operation failed")
    )
    await _abort(context, code, message)


async def _invalid(context: grpc.aio.ServicerContext, message: str) -> NoReturn:
    await _abort(context, grpc.StatusCode.INVALID_ARGUMENT, message)


async def _require_identity(context: grpc.aio.ServicerContext) -> Identity:
    identity = get_current_identity()
    if identity is None:
        await _abort(context, grpc.StatusCode.UNAUTHENTICATED, UNAUTHORIZED_MESSAGE)
    return identity


async def _post_id(request: dict[str, Any], context: grpc.aio.ServicerContext) -> UUID:
    try:
        return UUID(str(request["post_id"]))
    except (KeyError, ValueError):
        await _invalid(context, "post_id must be a valid UUID")


async def _positive_int(
    request: dict[str, Any],
    field: str,
    default: int,
    context: grpc.aio.ServicerContext,
) -> int:
    value = request.get(field, default)
    if not isinstance(value, int) or isinstance(value, bool) or value < 1:
        await _invalid(context, f"{field} must be a positive integer")
    return value


def _optional_text(request: dict[str, Any], field: str) -> str | None:
    value = request.get(field)
    return value if isinstance(value, str) and value else None


class PostServicer:
    """Implements ``post.Post`` and ``post.ProtectedPost``.

    Args:
        session_factory: Opens a transactional session per call
            (``Database.get_session`` in production).
    """

    def __init__(self, session_factory: SessionFactory) -> None:
        self._session_factory = session_factory

    # ------------------------------------------------------------------
    # post.Post (public)
    # ------------------------------------------------------------------

    async def get_all_post(
        self, request: dict[str, Any], context: grpc.aio.ServicerContext
    ) -> dict[str, Any]:
        page = await _positive_int(request, "page", 1, context)
        limits = await _positive_int(request, "limits", 10, context)
        async with self._session_factory() as session:
            result = await get_list_posts_handler(session).handle(
                ListPosts(page=page, limit=limits)
            )
        if isinstance(result, Failure):
            await _abort_with(context, result.error)
        return {
            "page": page,
            "limits": limits,
            "posts": [post_to_message(post) for post in result.value],
        }

    async def get_post_by_id(
        self, request: dict[str, Any], context: grpc.aio.ServicerContext
    ) -> dict[str, Any]:
        post_id = await _post_id(request, context)
        async with self._session_factory() as session:
            result = await get_get_post_handler(session).handle(GetPost(post_id=post_id))
        if isinstance(result, Failure):
            await _abort_with(context, result.error)
        return {"post": post_to_message(result.value)}

    # ------------------------------------------------------------------
    # post.ProtectedPost (identity required)
    # ------------------------------------------------------------------

    async def create_post(
        self, request: dict[str, Any], context: grpc.aio.ServicerContext
    ) -> dict[str, Any]:
        author = await _require_identity(context)
        title = _optional_text(request, "title")
        content = _optional_text(request, "content")
        if title is None or content is None:
            await _invalid(context, "title and content are required")
        async with self._session_factory() as session:
            result = await get_create_post_handler(session).handle(
                CreatePost(author=author, title=title, content=content)
            )
        match result:
            case Success(value=post):
                return {"post": post_to_message(post)}
            case Failure(error=error):
                await _abort_with(context, error)
            case _:
                await _abort_with(context, PostError.BACKEND_UNAVAILABLE)

    async def update_post(
        self, request: dict[str, Any], context: grpc.aio.ServicerContext
    ) -> dict[str, Any]:
        author = await _require_identity(context)
        post_id = await _post_id(request, context)
        title = _optional_text(request, "title")
        content = _optional_text(request, "content")
        if title is None and content is None:
            await _invalid(context, "nothing to update")
        async with self._session_factory() as session:
            result = await get_update_post_handler(session).handle(
                UpdatePost(author=author, post_id=post_id, title=title, content=content)
            )
        match result:
            case Success(value=post):
                return {"post": post_to_message(post)}
            case Failure(error=error):
                await _abort_with(context, error)
            case _:
                await _abort_with(context, PostError.BACKEND_UNAVAILABLE)

    async def delete_post(
        self, request: dict[str, Any], context: grpc.aio.ServicerContext
    ) -> dict[str, Any]:
        author = await _require_identity(context)
        post_id = await _post_id(request, context)
        async with self._session_factory() as session:
            result = await get_delete_post_handler(session).handle(
                DeletePost(author=author, post_id=post_id)
            )
        if isinstance(result, Failure):
            await _abort_with(context, result.error)
        return {"message": "Post deleted"}


def _unary(behavior: Callable[..., Any]) -> grpc.RpcMethodHandler:
    return grpc.unary_unary_rpc_method_handler(
        behavior,
        request_deserializer=deserialize,
        response_serializer=serialize,
    )


def build_generic_handlers(
    servicer: PostServicer,
) -> tuple[grpc.GenericRpcHandler, ...]:
    """Register both post services with JSON (de)serializers."""
    public = grpc.method_handlers_generic_handler(
        POST_SERVICE,
        {
            GET_ALL_POST: _unary(servicer.get_all_post),
            GET_POST_BY_ID: _unary(servicer.get_post_by_id),
        },
    )
    protected = grpc.method_handlers_generic_handler(
        PROTECTED_POST_SERVICE,
        {
            CREATE_POST: _unary(servicer.create_post),
            UPDATE_POST: _unary(servicer.update_post),
            DELETE_POST: _unary(servicer.delete_post),
        },
    )
    return public, protected

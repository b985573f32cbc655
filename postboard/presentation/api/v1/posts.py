"""Gateway post router.

Translates REST calls into post RPC calls. Write routes are verified here by
``require_identity`` and again by the RPC interceptor.

Endpoints:
    POST   /post/create_post
    PATCH  /post/update_post/{post_id}
    DELETE /post/delete_post/{post_id}
    GET    /post/get_all_post?page=&limits=
    GET    /post/get_post/{post_id}
"""

from uuid import UUID

import grpc
from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from postboard.core.container import get_logger, get_post_rpc_client
from postboard.presentation.api.errors import failure_response
from postboard.presentation.api.middleware.identity_dependencies import (
    require_identity,
)
from postboard.presentation.rpc.client import PostRpcClient, PostServiceError
from postboard.schemas.auth_schemas import ErrorResponse, UnauthorizedResponse
from postboard.schemas.post_schemas import (
    CreatePostRequest,
    PostDeletedResponse,
    PostEnvelope,
    PostListResponse,
    PostResponse,
    UpdatePostRequest,
)

router = APIRouter(prefix="/post", tags=["Post"])

# gRPC status -> (error code, HTTP status, message)
RPC_ERROR_MAPPING: dict[grpc.StatusCode, tuple[str, int, str]] = {
    grpc.StatusCode.UNAUTHENTICATED: (
        "unauthorized",
        status.HTTP_401_UNAUTHORIZED,
        "Unauthorized",
    ),
    grpc.StatusCode.PERMISSION_DENIED: (
        "permission_denied",
        status.HTTP_403_FORBIDDEN,
        "Only the author can change this post.",
    ),
    grpc.StatusCode.NOT_FOUND: (
        "post_not_found",
        status.HTTP_404_NOT_FOUND,
        "Post not found.",
    ),
    grpc.StatusCode.INVALID_ARGUMENT: (
        "invalid_argument",
        status.HTTP_400_BAD_REQUEST,
        "Invalid post request.",
    ),
}

_BAD_GATEWAY = (
    "backend_unavailable",
    status.HTTP_502_BAD_GATEWAY,
    "Post service unavailable. Please retry later.",
)

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    502: {"model": ErrorResponse},
}
_PROTECTED_RESPONSES = {
    **_ERROR_RESPONSES,
    401: {"model": UnauthorizedResponse},
    403: {"model": ErrorResponse},
}


def _rpc_failure(exc: PostServiceError) -> JSONResponse:
    error, status_code, message = RPC_ERROR_MAPPING.get(exc.code, _BAD_GATEWAY)
    if status_code >= 500:
        get_logger().error("Post RPC call failed", rpc_status=exc.code.name)
    return failure_response(error, {error: (status_code, message)})


@router.get(
    "/get_all_post",
    response_model=PostListResponse,
    responses=_ERROR_RESPONSES,
    summary="List posts",
)
async def get_all_post(
    page: int = Query(default=1, ge=1),
    limits: int = Query(default=10, ge=1, le=100),
    client: PostRpcClient = Depends(get_post_rpc_client),
) -> PostListResponse | JSONResponse:
    try:
        reply = await client.list_posts(page, limits)
    except PostServiceError as e:
        return _rpc_failure(e)
    return PostListResponse(
        page=page,
        limits=limits,
        posts=[PostResponse.from_message(m) for m in reply.get("posts", [])],
    )


@router.get(
    "/get_post/{post_id}",
    response_model=PostEnvelope,
    responses=_ERROR_RESPONSES,
    summary="Get post",
)
async def get_post(
    post_id: UUID,
    client: PostRpcClient = Depends(get_post_rpc_client),
) -> PostEnvelope | JSONResponse:
    try:
        reply = await client.get_post(post_id)
    except PostServiceError as e:
        return _rpc_failure(e)
    return PostEnvelope(post=PostResponse.from_message(reply["post"]))


@router.post(
    "/create_post",
    status_code=status.HTTP_201_CREATED,
    response_model=PostEnvelope,
    responses=_PROTECTED_RESPONSES,
    dependencies=[Depends(require_identity)],
    summary="Create post",
)
async def create_post(
    data: CreatePostRequest,
    client: PostRpcClient = Depends(get_post_rpc_client),
) -> PostEnvelope | JSONResponse:
    try:
        reply = await client.create_post(data.title, data.content)
    except PostServiceError as e:
        return _rpc_failure(e)
    return PostEnvelope(post=PostResponse.from_message(reply["post"]))


@router.patch(
    "/update_post/{post_id}",
    response_model=PostEnvelope,
    responses=_PROTECTED_RESPONSES,
    dependencies=[Depends(require_identity)],
    summary="Update post",
)
async def update_post(
    post_id: UUID,
    data: UpdatePostRequest,
    client: PostRpcClient = Depends(get_post_rpc_client),
) -> PostEnvelope | JSONResponse:
    try:
        reply = await client.update_post(post_id, data.title, data.content)
    except PostServiceError as e:
        return _rpc_failure(e)
    return PostEnvelope(post=PostResponse.from_message(reply["post"]))


@router.delete(
    "/delete_post/{post_id}",
    response_model=PostDeletedResponse,
    responses=_PROTECTED_RESPONSES,
    dependencies=[Depends(require_identity)],
    summary="Delete post",
)
async def delete_post(
    post_id: UUID,
    client: PostRpcClient = Depends(get_post_rpc_client),
) -> PostDeletedResponse | JSONResponse:
    try:
        await client.delete_post(post_id)
    except PostServiceError as e:
        return _rpc_failure(e)
    return PostDeletedResponse()

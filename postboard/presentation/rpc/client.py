"""Gateway-side client for the post RPC services.

Every call carries a deadline (``rpc_timeout_seconds``); there is no retry.
Failures are raised as ``PostServiceError`` carrying the gRPC status code so
the gateway can translate them to HTTP.
"""

from typing import Any
from uuid import UUID

import grpc

from postboard.presentation.rpc.messages import (
    CREATE_POST,
    DELETE_POST,
    GET_ALL_POST,
    GET_POST_BY_ID,
    POST_SERVICE,
    PROTECTED_POST_SERVICE,
    UPDATE_POST,
    deserialize,
    method_path,
    serialize,
)


class PostServiceError(Exception):
    """A post RPC call failed.

    Attributes:
        code: gRPC status code returned by the server (or transport).
        detail: Server-provided detail message.
    """

    def __init__(self, code: grpc.StatusCode, detail: str) -> None:
        super().__init__(f"{code.name}: {detail}")
        self.code = code
        self.detail = detail


class PostRpcClient:
    """Thin async client over a lazily opened insecure channel.

    Args:
        target: Server address, e.g. ``localhost:50051``.
        timeout: Per-call deadline in seconds.
    """

    def __init__(self, target: str, timeout: float = 5.0) -> None:
        self._target = target
        self._timeout = timeout
        self._channel: grpc.aio.Channel | None = None

    def _get_channel(self) -> grpc.aio.Channel:
        # Created on first use so it binds to the running event loop
        if self._channel is None:
            self._channel = grpc.aio.insecure_channel(self._target)
        return self._channel

    async def _call(
        self, service: str, method: str, message: dict[str, Any]
    ) -> dict[str, Any]:
        stub = self._get_channel().unary_unary(
            method_path(service, method),
            request_serializer=serialize,
            response_deserializer=deserialize,
        )
        try:
            return await stub(message, timeout=self._timeout)
        except grpc.aio.AioRpcError as e:
            raise PostServiceError(e.code(), e.details() or "") from e

    async def list_posts(self, page: int, limits: int) -> dict[str, Any]:
        return await self._call(
            POST_SERVICE, GET_ALL_POST, {"page": page, "limits": limits}
        )

    async def get_post(self, post_id: UUID) -> dict[str, Any]:
        return await self._call(POST_SERVICE, GET_POST_BY_ID, {"post_id": str(post_id)})

    async def create_post(self, title: str, content: str) -> dict[str, Any]:
        return await self._call(
            PROTECTED_POST_SERVICE, CREATE_POST, {"title": title, "content": content}
        )

    async def update_post(
        self, post_id: UUID, title: str | None, content: str | None
    ) -> dict[str, Any]:
        message: dict[str, Any] = {"post_id": str(post_id)}
        if title is not None:
            message["title"] = title
        if content is not None:
            message["content"] = content
        return await self._call(PROTECTED_POST_SERVICE, UPDATE_POST, message)

    async def delete_post(self, post_id: UUID) -> dict[str, Any]:
        return await self._call(
            PROTECTED_POST_SERVICE, DELETE_POST, {"post_id": str(post_id)}
        )

    async def close(self) -> None:
        if self._channel is not None:
            await self._channel.close()
            self._channel = None

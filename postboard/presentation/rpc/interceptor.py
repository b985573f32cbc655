"""Identity interceptor: the RPC call site of IdentityVerifier.

Every method of ``post.ProtectedPost`` is wrapped so that, before the handler
body runs, the cached access token is verified. On success the identity is
placed in ``current_identity`` for the duration of the call; on any failure
the call is aborted with ``UNAUTHENTICATED`` / ``"Unauthorized"`` and the
handler is never invoked. Methods of other services pass through untouched.
"""

from collections.abc import Awaitable, Callable
from contextvars import ContextVar
from typing import Any

import grpc

from postboard.application.services import IdentityVerifier
from postboard.core.result import Success
from postboard.domain.entities import Identity
from postboard.domain.protocols import LoggerProtocol
from postboard.presentation.rpc.messages import PROTECTED_POST_SERVICE

UNAUTHORIZED_MESSAGE = "Unauthorized"

current_identity: ContextVar[Identity | None] = ContextVar(
    "current_identity", default=None
)


def get_current_identity() -> Identity | None:
    """Identity attached by the interceptor, or None outside a gated call."""
    return current_identity.get()


class IdentityInterceptor(grpc.aio.ServerInterceptor):
    """Gate protected services behind IdentityVerifier."""

    def __init__(
        self,
        verifier: IdentityVerifier,
        logger: LoggerProtocol,
        protected_services: tuple[str, ...] = (PROTECTED_POST_SERVICE,),
    ) -> None:
        self._verifier = verifier
        self._logger = logger
        self._prefixes = tuple(f"/{service}/" for service in protected_services)

    async def intercept_service(
        self,
        continuation: Callable[
            [grpc.HandlerCallDetails], Awaitable[grpc.RpcMethodHandler]
        ],
        handler_call_details: grpc.HandlerCallDetails,
    ) -> grpc.RpcMethodHandler:
        handler = await continuation(handler_call_details)
        if handler is None or not handler_call_details.method.startswith(
            self._prefixes
        ):
            return handler
        if handler.unary_unary is None:
            # Only unary methods are exposed by the post services
            return handler

        behavior = handler.unary_unary
        verifier = self._verifier
        log = self._logger.bind(rpc_method=handler_call_details.method)

        async def guarded(request: Any, context: grpc.aio.ServicerContext) -> Any:
            result = await verifier.verify()
            if isinstance(result, Success):
                token = current_identity.set(result.value)
                try:
                    return await behavior(request, context)
                finally:
                    current_identity.reset(token)

            log.info("RPC call rejected")
            # abort() raises, the handler never runs
            await context.abort(grpc.StatusCode.UNAUTHENTICATED, UNAUTHORIZED_MESSAGE)
            return None

        return grpc.unary_unary_rpc_method_handler(
            guarded,
            request_deserializer=handler.request_deserializer,
            response_serializer=handler.response_serializer,
        )

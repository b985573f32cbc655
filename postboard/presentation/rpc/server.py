"""Async gRPC server for the post services.

Run with ``python -m postboard.presentation.rpc.server`` or the
``postboard-rpc`` console script.
"""

import asyncio

import grpc

from postboard.core.config import get_settings
from postboard.core.container import (
    get_database,
    get_identity_verifier,
    get_logger,
    get_token_codec,
)
from postboard.presentation.rpc.interceptor import IdentityInterceptor
from postboard.presentation.rpc.post_service import (
    PostServicer,
    build_generic_handlers,
)


def create_server() -> grpc.aio.Server:
    """Build a configured, unstarted server.

    The token codec is built first so that a missing or short secret aborts
    startup before the port is bound.
    """
    get_token_codec()
    logger = get_logger()

    server = grpc.aio.server(
        interceptors=[IdentityInterceptor(get_identity_verifier(), logger)]
    )
    server.add_generic_rpc_handlers(
        build_generic_handlers(PostServicer(get_database().get_session))
    )
    return server


async def serve() -> None:
    """Start the post RPC server and block until termination."""
    settings = get_settings()
    logger = get_logger()
    server = create_server()
    address = f"{settings.rpc_host}:{settings.rpc_port}"
    server.add_insecure_port(address)

    await server.start()
    logger.info("Post RPC server started", address=address)
    try:
        await server.wait_for_termination()
    finally:
        await server.stop(grace=5)
        await get_database().close()
        logger.info("Post RPC server stopped")


def main() -> None:
    asyncio.run(serve())


if __name__ == "__main__":
    main()

"""
Gateway FastAPI application entry point.

Translates REST post calls into post RPC calls. Run with
``uvicorn postboard.gateway:app``.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from postboard.core.config import get_settings
from postboard.core.container import get_logger, get_post_rpc_client, get_token_codec
from postboard.presentation.api.errors import register_exception_handlers
from postboard.presentation.api.middleware.trace_middleware import TraceMiddleware
from postboard.presentation.api.v1 import gateway_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Build the token codec on startup, close the RPC channel on shutdown."""
    logger = get_logger()
    try:
        get_token_codec()
    except ValueError as e:
        logger.critical("Token codec unavailable, refusing to start", error=e)
        raise
    logger.info("Gateway started", rpc_target=get_settings().rpc_target)
    yield
    await get_post_rpc_client().close()


def create_app() -> FastAPI:
    """Build the gateway application."""
    settings = get_settings()
    application = FastAPI(
        title=f"{settings.app_name} Gateway",
        description="REST gateway for the post RPC service",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    application.add_middleware(TraceMiddleware)
    register_exception_handlers(application)
    application.include_router(gateway_router)
    return application


app = create_app()

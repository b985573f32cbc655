"""
Auth/user service FastAPI application entry point.

Run with ``uvicorn postboard.main:app``.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from postboard.core.config import get_settings
from postboard.core.container import get_database, get_logger, get_token_codec
from postboard.presentation.api.errors import register_exception_handlers
from postboard.presentation.api.middleware.trace_middleware import TraceMiddleware
from postboard.presentation.api.v1 import auth_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    - Startup: build the token codec (a bad secret aborts startup)
    - Shutdown: dispose of the database pool

    Args:
        app: FastAPI application instance.
    """
    logger = get_logger()
    try:
        get_token_codec()
    except ValueError as e:
        logger.critical("Token codec unavailable, refusing to start", error=e)
        raise
    logger.info("Auth service started")
    yield
    await get_database().close()


def create_app() -> FastAPI:
    """Build the auth/user service application."""
    settings = get_settings()
    application = FastAPI(
        title=settings.app_name,
        description="Authentication and user service",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    application.add_middleware(TraceMiddleware)
    register_exception_handlers(application)
    application.include_router(auth_router)
    return application


app = create_app()

"""Global exception handlers for the FastAPI applications.

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from postboard.core.container import get_logger
from postboard.domain.errors import SigningError
from postboard.presentation.api.errors.error_responses import UnauthorizedError
from postboard.schemas.auth_schemas import ErrorResponse, UnauthorizedResponse


async def unauthorized_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render every identity rejection identically."""
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content=UnauthorizedResponse().model_dump(),
    )


async def signing_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """A token could not be signed. Internal fault, never the caller's."""
    get_logger().critical(
        "Token signing failed",
        error=exc,
        request_path=request.url.path,
        trace_id=getattr(request.state, "trace_id", None),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(
            error="internal_error", message="An unexpected error occurred."
        ).model_dump(),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert any unhandled exception into a 500 without leaking details."""
    get_logger().error(
        "Unhandled exception",
        error=exc,
        request_path=request.url.path,
        request_method=request.method,
        trace_id=getattr(request.state, "trace_id", None),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(
            error="internal_error", message="An unexpected error occurred."
        ).model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(UnauthorizedError, unauthorized_handler)
    app.add_exception_handler(SigningError, signing_error_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

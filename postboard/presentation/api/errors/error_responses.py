"""Error response builders shared by all routers."""

from fastapi import status
from fastapi.responses import JSONResponse

from postboard.domain.errors import AuthFailure
from postboard.presentation.api.middleware.trace_middleware import get_trace_id
from postboard.schemas.auth_schemas import ErrorResponse


class UnauthorizedError(Exception):
    """Identity verification rejected the request.

    Carries no reason on purpose: the response must not reveal whether the
    cache was empty, the token expired or the signature was wrong.
    """


# Handler error code -> (HTTP status, client message)
AUTH_ERROR_MAPPING: dict[str, tuple[int, str]] = {
    AuthFailure.INPUT_ERROR: (
        status.HTTP_400_BAD_REQUEST,
        "Provide either an email or a username, not both.",
    ),
    AuthFailure.INVALID_SIGNATURE: (
        status.HTTP_400_BAD_REQUEST,
        "The provided token is not valid.",
    ),
    AuthFailure.INVALID_CREDENTIALS: (
        status.HTTP_401_UNAUTHORIZED,
        "Invalid login credentials.",
    ),
    AuthFailure.TOKEN_EXPIRED: (
        status.HTTP_401_UNAUTHORIZED,
        "TOKEN EXPIRED. Please log in again.",
    ),
    AuthFailure.UNKNOWN_TOKEN: (
        status.HTTP_401_UNAUTHORIZED,
        "Refresh token not recognized. Please log in again.",
    ),
    AuthFailure.INVALID_TOKEN: (
        status.HTTP_401_UNAUTHORIZED,
        "The provided token is not valid.",
    ),
    AuthFailure.BACKEND_UNAVAILABLE: (
        status.HTTP_502_BAD_GATEWAY,
        "A backing service is unavailable. Please retry later.",
    ),
}


def failure_response(
    error: str,
    mapping: dict[str, tuple[int, str]] = AUTH_ERROR_MAPPING,
    default: tuple[int, str] = (status.HTTP_400_BAD_REQUEST, "Request failed."),
) -> JSONResponse:
    """Render a handler failure as ``{"status": "failed", "error", "message"}``.

    Args:
        error: Handler error code.
        mapping: Error code to (status, message) table.
        default: Used for codes missing from ``mapping``.
    """
    status_code, message = mapping.get(error, default)
    trace_id = get_trace_id()
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=error, message=message).model_dump(),
        headers={"X-Trace-Id": trace_id} if trace_id else None,
    )

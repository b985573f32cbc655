"""Token router.

Endpoints:
    GET /token/refresh_token - New access token (refresh-token header)
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from postboard.application.commands.auth_commands import RefreshAccessToken
from postboard.application.commands.handlers.refresh_access_token_handler import (
    RefreshAccessTokenHandler,
)
from postboard.core.container import get_refresh_access_token_handler
from postboard.core.result import Failure, Success
from postboard.presentation.api.errors import failure_response
from postboard.presentation.api.middleware.identity_dependencies import (
    RefreshTokenHeader,
)
from postboard.schemas.auth_schemas import (
    ErrorResponse,
    RefreshTokenResponse,
)

router = APIRouter(prefix="/token", tags=["Token"])


@router.get(
    "/refresh_token",
    response_model=RefreshTokenResponse,
    responses={
        400: {"description": "Token signature invalid", "model": ErrorResponse},
        401: {
            "description": "Missing header, expired or unknown token",
            "model": ErrorResponse,
        },
        502: {"description": "Store or cache unavailable", "model": ErrorResponse},
    },
    summary="Refresh access token",
    description="Exchange the refresh-token header for a new access token. "
    "The refresh token itself is not rotated.",
)
async def refresh_token(
    token: RefreshTokenHeader,
    handler: RefreshAccessTokenHandler = Depends(get_refresh_access_token_handler),
) -> RefreshTokenResponse | JSONResponse:
    match await handler.handle(RefreshAccessToken(refresh_token=token)):
        case Success(value=access_token):
            return RefreshTokenResponse(access_token=access_token)
        case Failure(error=error):
            return failure_response(error)
        case _:
            # Unreachable but needed for type checker
            return failure_response("backend_unavailable")

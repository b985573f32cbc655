"""User router (protected).

Every route passes through ``require_identity`` first.

Endpoints:
    GET /user/user_profile - Identity attached by require_identity, re-checked
                             against the user store
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from postboard.application.commands.auth_commands import VerifyAccess
from postboard.application.commands.handlers.verify_access_handler import (
    VerifyAccessHandler,
)
from postboard.core.container import get_verify_access_handler
from postboard.core.result import Failure, Success
from postboard.presentation.api.errors import failure_response
from postboard.presentation.api.middleware.identity_dependencies import (
    CurrentIdentity,
    require_identity,
)
from postboard.schemas.auth_schemas import (
    IdentityResponse,
    ProfileResponse,
    UnauthorizedResponse,
)

router = APIRouter(
    prefix="/user",
    tags=["User"],
    dependencies=[Depends(require_identity)],
    responses={401: {"model": UnauthorizedResponse}},
)


@router.get(
    "/user_profile",
    response_model=ProfileResponse,
    summary="Current user profile",
)
async def user_profile(
    identity: CurrentIdentity,
    handler: VerifyAccessHandler = Depends(get_verify_access_handler),
) -> ProfileResponse | JSONResponse:
    match await handler.handle(VerifyAccess(identity=identity)):
        case Success(value=current):
            return ProfileResponse(identity=IdentityResponse.from_identity(current))
        case Failure(error=error):
            return failure_response(error)
        case _:
            # Unreachable but needed for type checker
            return failure_response("backend_unavailable")

"""Auth router.

Endpoints:
    POST /auth/register - Create user (201)
    POST /auth/login    - Log in, issue access + refresh tokens (201)
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from postboard.application.commands.auth_commands import LoginUser, RegisterUser
from postboard.application.commands.handlers.login_user_handler import (
    LoginUserHandler,
)
from postboard.application.commands.handlers.register_user_handler import (
    RegisterUserHandler,
    RegistrationError,
)
from postboard.core.container import get_login_user_handler, get_register_user_handler
from postboard.core.result import Failure, Success
from postboard.presentation.api.errors import failure_response
from postboard.schemas.auth_schemas import (
    ErrorResponse,
    IdentityResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)

router = APIRouter(prefix="/auth", tags=["Auth"])

REGISTRATION_ERROR_MAPPING: dict[str, tuple[int, str]] = {
    RegistrationError.USERNAME_TOO_SHORT: (
        status.HTTP_400_BAD_REQUEST,
        "Username must be at least 5 characters.",
    ),
    RegistrationError.PASSWORD_TOO_SHORT: (
        status.HTTP_400_BAD_REQUEST,
        "Password must be at least 5 characters.",
    ),
    RegistrationError.PASSWORD_TOO_LONG: (
        status.HTTP_400_BAD_REQUEST,
        "Password must be at most 72 bytes when UTF-8 encoded.",
    ),
    RegistrationError.USER_EXISTS: (
        status.HTTP_409_CONFLICT,
        "Email or username already registered.",
    ),
    RegistrationError.BACKEND_UNAVAILABLE: (
        status.HTTP_502_BAD_GATEWAY,
        "A backing service is unavailable. Please retry later.",
    ),
}


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=RegisterResponse,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
    summary="Register user",
)
async def register(
    data: RegisterRequest,
    handler: RegisterUserHandler = Depends(get_register_user_handler),
) -> RegisterResponse | JSONResponse:
    result = await handler.handle(
        RegisterUser(username=data.username, email=data.email, password=data.password)
    )
    match result:
        case Success(value=identity):
            return RegisterResponse(identity=IdentityResponse.from_identity(identity))
        case Failure(error=error):
            return failure_response(error, REGISTRATION_ERROR_MAPPING)
        case _:
            # Unreachable but needed for type checker
            return failure_response(RegistrationError.BACKEND_UNAVAILABLE)


@router.post(
    "/login",
    status_code=status.HTTP_201_CREATED,
    response_model=LoginResponse,
    responses={
        400: {"description": "Missing or ambiguous login key", "model": ErrorResponse},
        401: {"description": "Invalid credentials", "model": ErrorResponse},
        502: {"description": "Store or cache unavailable", "model": ErrorResponse},
    },
    summary="Log in",
    description="Verify credentials and issue an access token and a refresh token.",
)
async def login(
    data: LoginRequest,
    handler: LoginUserHandler = Depends(get_login_user_handler),
) -> LoginResponse | JSONResponse:
    """Log in with email or username.

    POST /api/auth/login -> 201 Created

    Returns:
        LoginResponse on success, JSONResponse with error on failure
        (400/401/502).
    """
    command = LoginUser(
        email=data.email,
        username=data.username,
        password=data.password,
    )
    match await handler.handle(command):
        case Success(value=login_response):
            return LoginResponse(
                identity=IdentityResponse.from_identity(login_response.identity),
                access_token=login_response.access_token,
                refresh_token=login_response.refresh_token,
            )
        case Failure(error=error):
            return failure_response(error)
        case _:
            # Unreachable but needed for type checker
            return failure_response("backend_unavailable")

"""Authentication request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.

Endpoints:
    POST /api/auth/register         - Create user
    POST /api/auth/login            - Log in (issues access + refresh tokens)
    GET  /api/token/refresh_token   - New access token from refresh-token header
    GET  /api/user/user_profile     - Current identity
"""

from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from postboard.domain.entities import Identity


class IdentityResponse(BaseModel):
    """Identity fields returned to clients."""

    id: UUID
    username: str
    email: str

    @classmethod
    def from_identity(cls, identity: Identity) -> "IdentityResponse":
        return cls(id=identity.id, username=identity.username, email=identity.email)


# =============================================================================
# Registration
# =============================================================================


class RegisterRequest(BaseModel):
    """Request schema for user registration.

    POST /api/auth/register
    Returns: 201 Created
    """

    username: str = Field(..., min_length=1, max_length=100, examples=["alice01"])
    email: EmailStr = Field(..., examples=["alice@example.com"])
    password: str = Field(..., min_length=1, max_length=72, examples=["correct-horse"])


class RegisterResponse(BaseModel):
    """Response schema for registration (201 Created)."""

    status: Literal["success"] = "success"
    identity: IdentityResponse


# =============================================================================
# Login
# =============================================================================


class LoginRequest(BaseModel):
    """Request schema for login.

    Exactly one of ``email`` or ``username`` must be supplied.

    POST /api/auth/login
    Returns: 201 Created
    """

    email: EmailStr | None = Field(default=None, examples=["alice@example.com"])
    username: str | None = Field(default=None, examples=["alice01"])
    password: str = Field(..., examples=["correct-horse"])

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"username": "alice01", "password": "correct-horse"}
        }
    )


class LoginResponse(BaseModel):
    """Response schema for successful login."""

    status: Literal["success"] = "success"
    identity: IdentityResponse
    access_token: str
    refresh_token: str


# =============================================================================
# Token refresh / profile
# =============================================================================


class RefreshTokenResponse(BaseModel):
    """Response schema for access token refresh."""

    status: Literal["success"] = "success"
    access_token: str


class ProfileResponse(BaseModel):
    """Response schema for the current user's profile."""

    status: Literal["success"] = "success"
    identity: IdentityResponse


# =============================================================================
# Errors
# =============================================================================


class ErrorResponse(BaseModel):
    """Error body for handler failures.

    ``error`` is a machine-readable code, ``message`` is for humans.
    """

    status: Literal["failed"] = "failed"
    error: str
    message: str


class UnauthorizedResponse(BaseModel):
    """Uniform body for every identity verification rejection."""

    status: Literal["failed"] = "failed"
    message: str = "Unauthorized"

"""Authentication commands (CQRS write operations).

All commands are immutable (frozen=True) and use keyword-only arguments
(kw_only=True). Handlers execute the logic and return Result types.
"""

from dataclasses import dataclass

from postboard.domain.entities import Identity


@dataclass(frozen=True, kw_only=True)
class LoginUser:
    """Log in with a password and exactly one login key.

    Attributes:
        password: Plaintext password.
        email: Email login key (mutually exclusive with username).
        username: Username login key (mutually exclusive with email).

    Example:
        >>> command = LoginUser(username="alice01", password="correct-horse")
        >>> result = await handler.handle(command)
    """

    password: str
    email: str | None = None
    username: str | None = None


@dataclass(frozen=True, kw_only=True)
class RefreshAccessToken:
    """Exchange a refresh token for a new access token.

    Attributes:
        refresh_token: Signed refresh token received at login.
    """

    refresh_token: str


@dataclass(frozen=True, kw_only=True)
class VerifyAccess:
    """Re-confirm an identity snapshot against the user store.

    Attributes:
        identity: Snapshot already verified by the caller (the REST
            dependency attaches one). When given, no token is decoded.
        access_token: Token to decode when no snapshot is supplied. When both
            are None the currently cached token is used.
    """

    identity: Identity | None = None
    access_token: str | None = None


@dataclass(frozen=True, kw_only=True)
class RegisterUser:
    """Register new user account.

    Attributes:
        username: Unique login name (at least 5 characters).
        email: Email address (already format-validated by the schema).
        password: Plaintext password (at least 5 characters, hashed before storage).
    """

    username: str
    email: str
    password: str

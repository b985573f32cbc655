"""Login handler.

Flow:
1. Resolve the user by exactly one login key (email or username)
2. Verify the password hash
3. Issue a refresh token bound to the user id
4. Persist the refresh token (abort the login if this fails)
5. Issue an access token carrying the identity snapshot
6. Replace the cached access token (delete failures ignored, set failures surfaced)
7. Return identity + both tokens

Steps run strictly in this order: a login that cannot durably record its
refresh token must not hand out a session.
"""

from dataclasses import dataclass

from postboard.application.commands.auth_commands import LoginUser
from postboard.core.result import Failure, Result, Success
from postboard.domain.entities import Identity, UserRecord
from postboard.domain.errors import AuthFailure
from postboard.domain.protocols import (
    AccessTokenCacheProtocol,
    LoggerProtocol,
    PasswordHashingProtocol,
    RefreshTokenRepository,
    TokenCodecProtocol,
    UserRepository,
)


@dataclass(frozen=True, kw_only=True)
class LoginResponse:
    """Response data for successful login."""

    identity: Identity
    access_token: str
    refresh_token: str


class LoginUserHandler:
    """Handler for LoginUser command."""

    def __init__(
        self,
        user_repo: UserRepository,
        refresh_token_repo: RefreshTokenRepository,
        access_token_cache: AccessTokenCacheProtocol,
        token_codec: TokenCodecProtocol,
        password_service: PasswordHashingProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._refresh_token_repo = refresh_token_repo
        self._access_token_cache = access_token_cache
        self._token_codec = token_codec
        self._password_service = password_service
        self._logger = logger

    async def handle(self, cmd: LoginUser) -> Result[LoginResponse, str]:
        """Handle login command.

        Args:
            cmd: LoginUser command.

        Returns:
            Success(LoginResponse) on successful login.
            Failure(AuthFailure.*) otherwise.

        Raises:
            SigningError: If a token cannot be signed (fatal, surfaces as 500).
        """
        if (cmd.email is None) == (cmd.username is None):
            self._logger.info("Login rejected: exactly one login key required")
            return Failure(error=AuthFailure.INPUT_ERROR)

        # Step 1: Resolve identity
        if cmd.email is not None:
            lookup = await self._user_repo.find_by_email(cmd.email)
        else:
            lookup = await self._user_repo.find_by_username(cmd.username or "")

        match lookup:
            case Failure(error=error):
                self._logger.error("Login user lookup failed", reason=error.message)
                return Failure(error=AuthFailure.BACKEND_UNAVAILABLE)
            case Success(value=None):
                self._logger.warning(
                    "Login failed: unknown user",
                    username=cmd.username,
                    email=cmd.email,
                )
                return Failure(error=AuthFailure.INVALID_CREDENTIALS)
            case Success(value=UserRecord() as found):
                user = found
            case _:
                return Failure(error=AuthFailure.BACKEND_UNAVAILABLE)

        # Step 2: Verify password
        if not self._password_service.verify_password(cmd.password, user.password_hash):
            self._logger.warning(
                "Login failed: invalid password", user_id=str(user.id)
            )
            return Failure(error=AuthFailure.INVALID_CREDENTIALS)

        # Steps 3-4: Issue and persist refresh token
        refresh_token = self._token_codec.issue_refresh_token(user.id)
        insert_result = await self._refresh_token_repo.insert(refresh_token, user.id)
        if isinstance(insert_result, Failure):
            self._logger.error(
                "Refresh token persistence failed",
                user_id=str(user.id),
                reason=insert_result.error.message,
            )
            return Failure(error=AuthFailure.BACKEND_UNAVAILABLE)

        # Steps 5-6: Issue access token and take over the cache slot
        identity = user.identity
        access_token = self._token_codec.issue_access_token(identity)
        if isinstance(await self._access_token_cache.replace(access_token), Failure):
            return Failure(error=AuthFailure.BACKEND_UNAVAILABLE)

        self._logger.info(
            "User logged in", user_id=str(user.id), username=user.username
        )
        return Success(
            value=LoginResponse(
                identity=identity,
                access_token=access_token,
                refresh_token=refresh_token,
            )
        )

"""Refresh Access Token handler.

Flow:
1. Verify the refresh token (signature, then expiry)
2. Match it in the refresh token store against the owner id it carries
3. Load the owner's current identity (picks up username/email changes)
4. Issue a new access token and replace the cached one
5. Return the new access token

The refresh token itself is not rotated and stays valid until it expires.
A rejected refresh leaves the cached access token untouched.
"""

from postboard.application.commands.auth_commands import RefreshAccessToken
from postboard.core.errors import NotFoundError
from postboard.core.result import Failure, Result, Success
from postboard.domain.entities import UserRecord
from postboard.domain.errors import AuthFailure, TokenError
from postboard.domain.protocols import (
    AccessTokenCacheProtocol,
    LoggerProtocol,
    RefreshTokenRepository,
    TokenCodecProtocol,
    UserRepository,
)

_TOKEN_ERROR_TO_FAILURE = {
    TokenError.INVALID_SIGNATURE: AuthFailure.INVALID_SIGNATURE,
    TokenError.EXPIRED: AuthFailure.TOKEN_EXPIRED,
    TokenError.MALFORMED: AuthFailure.INVALID_TOKEN,
}


class RefreshAccessTokenHandler:
    """Handler for RefreshAccessToken command."""

    def __init__(
        self,
        user_repo: UserRepository,
        refresh_token_repo: RefreshTokenRepository,
        access_token_cache: AccessTokenCacheProtocol,
        token_codec: TokenCodecProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._refresh_token_repo = refresh_token_repo
        self._access_token_cache = access_token_cache
        self._token_codec = token_codec
        self._logger = logger

    async def handle(self, cmd: RefreshAccessToken) -> Result[str, str]:
        """Handle refresh access token command.

        Returns:
            Success(access_token) on successful refresh.
            Failure(AuthFailure.*) on failure.
        """
        # Step 1: Verify refresh token
        match self._token_codec.verify_refresh_token(cmd.refresh_token):
            case Failure(error=token_error):
                self._logger.info(
                    "Refresh rejected: token verification failed",
                    reason=token_error.value,
                )
                return Failure(error=_TOKEN_ERROR_TO_FAILURE[token_error])
            case Success(value=payload):
                owner_id = payload.owner_id

        # Step 2: Match against the store
        match await self._refresh_token_repo.find(cmd.refresh_token, owner_id):
            case Failure(error=NotFoundError()):
                self._logger.warning(
                    "Refresh rejected: token not on file", user_id=str(owner_id)
                )
                return Failure(error=AuthFailure.UNKNOWN_TOKEN)
            case Failure(error=error):
                self._logger.error(
                    "Refresh token lookup failed",
                    user_id=str(owner_id),
                    reason=error.message,
                )
                return Failure(error=AuthFailure.BACKEND_UNAVAILABLE)

        # Step 3: Current identity snapshot
        match await self._user_repo.find_by_id(owner_id):
            case Failure(error=error):
                self._logger.error(
                    "Refresh user lookup failed",
                    user_id=str(owner_id),
                    reason=error.message,
                )
                return Failure(error=AuthFailure.BACKEND_UNAVAILABLE)
            case Success(value=UserRecord() as user):
                identity = user.identity
            case _:
                self._logger.warning(
                    "Refresh rejected: owner no longer exists", user_id=str(owner_id)
                )
                return Failure(error=AuthFailure.UNKNOWN_TOKEN)

        # Step 4: New access token takes over the cache slot
        access_token = self._token_codec.issue_access_token(identity)
        if isinstance(await self._access_token_cache.replace(access_token), Failure):
            return Failure(error=AuthFailure.BACKEND_UNAVAILABLE)

        self._logger.info("Access token refreshed", user_id=str(owner_id))
        return Success(value=access_token)

"""Verify Access handler (profile lookup).

Re-confirms an identity snapshot against the canonical user record. The
snapshot is the one the REST dependency already verified and attached to the
request; without one, the given (or cached) access token is decoded instead.

A snapshot whose email no longer matches the record is rejected, so a stale
identity cannot outlive a change to the user.
"""

from postboard.application.commands.auth_commands import VerifyAccess
from postboard.core.result import Failure, Result, Success
from postboard.domain.entities import Identity, UserRecord
from postboard.domain.errors import AuthFailure, TokenError
from postboard.domain.protocols import (
    AccessTokenCacheProtocol,
    LoggerProtocol,
    TokenCodecProtocol,
    UserRepository,
)
from postboard.infrastructure.errors import CacheError


class VerifyAccessHandler:
    """Handler for VerifyAccess command."""

    def __init__(
        self,
        user_repo: UserRepository,
        access_token_cache: AccessTokenCacheProtocol,
        token_codec: TokenCodecProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._access_token_cache = access_token_cache
        self._token_codec = token_codec
        self._logger = logger

    async def handle(self, cmd: VerifyAccess) -> Result[Identity, str]:
        """Handle verify access command.

        Returns:
            Success(Identity) with the current canonical identity.
            Failure(AuthFailure.*) on failure.
        """
        if cmd.identity is not None:
            snapshot = cmd.identity
        else:
            match await self._decode_snapshot(cmd.access_token):
                case Failure(error=error):
                    return Failure(error=error)
                case Success(value=decoded):
                    snapshot = decoded

        match await self._user_repo.find_by_id(snapshot.id):
            case Failure(error=error):
                self._logger.error(
                    "Profile user lookup failed",
                    user_id=str(snapshot.id),
                    reason=error.message,
                )
                return Failure(error=AuthFailure.BACKEND_UNAVAILABLE)
            case Success(value=UserRecord() as user) if (
                user.email.lower() == snapshot.email.lower()
            ):
                return Success(value=user.identity)
            case _:
                self._logger.warning(
                    "Access token identity is stale", user_id=str(snapshot.id)
                )
                return Failure(error=AuthFailure.INVALID_TOKEN)

    async def _decode_snapshot(self, token: str | None) -> Result[Identity, str]:
        if token is None:
            match await self._access_token_cache.get():
                case Success(value=cached):
                    token = cached
                case Failure(error=CacheError() as error) if error.is_miss:
                    return Failure(error=AuthFailure.INVALID_TOKEN)
                case _:
                    return Failure(error=AuthFailure.BACKEND_UNAVAILABLE)

        match self._token_codec.verify_access_token(token):
            case Success(value=payload):
                return Success(value=payload.identity)
            case Failure(error=TokenError.EXPIRED):
                return Failure(error=AuthFailure.TOKEN_EXPIRED)
            case Failure(error=TokenError.INVALID_SIGNATURE):
                return Failure(error=AuthFailure.INVALID_SIGNATURE)
            case _:
                return Failure(error=AuthFailure.INVALID_TOKEN)

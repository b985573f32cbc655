"""Cross-service identity verification.

Both protected call sites (the REST dependency and the RPC interceptor) run
the same check:

1. Read the single cached access token slot. A miss or backend error rejects.
2. Verify the cached token. Any verification failure rejects.
3. Hand back the decoded identity for the caller to attach to its context.

The verifier authenticates against the cached token, never against a token
presented by the caller, and never touches the relational store. Every
rejection yields the same ``AuthFailure.UNAUTHORIZED`` so callers cannot
learn why verification failed.
"""

from postboard.core.result import Failure, Result, Success
from postboard.domain.entities import Identity
from postboard.domain.errors import AuthFailure
from postboard.domain.protocols import (
    AccessTokenCacheProtocol,
    LoggerProtocol,
    TokenCodecProtocol,
)


class IdentityVerifier:
    """Resolve the current session's identity from the access token cache."""

    def __init__(
        self,
        access_token_cache: AccessTokenCacheProtocol,
        token_codec: TokenCodecProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._access_token_cache = access_token_cache
        self._token_codec = token_codec
        self._logger = logger

    async def verify(self) -> Result[Identity, str]:
        """Return the verified identity or ``AuthFailure.UNAUTHORIZED``."""
        match await self._access_token_cache.get():
            case Failure(error=error):
                self._logger.info(
                    "Identity rejected: no usable cached token",
                    reason=error.message,
                )
                return Failure(error=AuthFailure.UNAUTHORIZED)
            case Success(value=token):
                pass

        match self._token_codec.verify_access_token(token):
            case Failure(error=token_error):
                self._logger.info(
                    "Identity rejected: cached token invalid",
                    reason=token_error.value,
                )
                return Failure(error=AuthFailure.UNAUTHORIZED)
            case Success(value=payload):
                return Success(value=payload.identity)
            case _:
                # Unreachable but needed for type checker
                return Failure(error=AuthFailure.UNAUTHORIZED)

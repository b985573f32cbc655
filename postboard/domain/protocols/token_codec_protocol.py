"""Token codec protocol for domain layer.

Encodes and verifies signed, expiring token payloads with a single shared
secret. Access tokens carry an identity snapshot; refresh tokens carry only
the owner id.

Verification checks the signature first, then expiry. The distinction
matters: ``INVALID_SIGNATURE`` means a crafted or garbage credential (400),
``EXPIRED`` means a normal refresh or re-login is required (401).
"""

from typing import Protocol
from uuid import UUID

from postboard.core.result import Result
from postboard.domain.entities import (
    AccessTokenPayload,
    Identity,
    RefreshTokenPayload,
)
from postboard.domain.errors import TokenError


class TokenCodecProtocol(Protocol):
    """Signed token issue/verify interface."""

    def issue_access_token(self, identity: Identity) -> str:
        """Issue an access token embedding ``identity``.

        Raises:
            SigningError: If the payload cannot be serialized or signed.
        """
        ...

    def issue_refresh_token(self, owner_id: UUID) -> str:
        """Issue a refresh token bound to ``owner_id``.

        Raises:
            SigningError: If the payload cannot be serialized or signed.
        """
        ...

    def verify_access_token(
        self, token: str
    ) -> Result[AccessTokenPayload, TokenError]:
        """Verify an access token and return its payload."""
        ...

    def verify_refresh_token(
        self, token: str
    ) -> Result[RefreshTokenPayload, TokenError]:
        """Verify a refresh token and return its payload."""
        ...

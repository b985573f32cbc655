"""JWT token codec (adapter).

Implements TokenCodecProtocol using PyJWT with HMAC-SHA256.

Token shapes:
    Access:  {typ: "access",  iat, exp, jti, identity: {id, username, email}}
    Refresh: {typ: "refresh", iat, exp, jti, owner_id}

Security:
    - HMAC-SHA256 (HS256) with one shared secret of at least 32 bytes
    - Signature verified before expiry, so a foreign-secret token is always
      reported as INVALID_SIGNATURE
    - Unique JWT ID (jti) per token, so two tokens issued in the same second
      never collide in the refresh store
"""

from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

import jwt
from jwt.exceptions import (
    ExpiredSignatureError,
    InvalidSignatureError,
    InvalidTokenError,
)
from uuid_extensions import uuid7

from postboard.core.result import Failure, Result, Success
from postboard.domain.entities import (
    AccessTokenPayload,
    Identity,
    RefreshTokenPayload,
)
from postboard.domain.errors import SigningError, TokenError

MIN_SECRET_KEY_BYTES = 32
ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"


class JWTTokenCodec:
    """Issue and verify signed access and refresh tokens.

    Usage:
        from postboard.core.container import get_token_codec

        codec = get_token_codec()
        token = codec.issue_access_token(identity)
        match codec.verify_access_token(token):
            case Success(value=payload):
                identity = payload.identity
            case Failure(error=TokenError.EXPIRED):
                ...
    """

    def __init__(
        self,
        secret_key: str,
        access_token_ttl: timedelta = timedelta(minutes=20),
        refresh_token_ttl: timedelta = timedelta(days=7),
    ) -> None:
        """Initialize codec.

        Args:
            secret_key: Shared HMAC secret. MUST be at least 32 bytes.
            access_token_ttl: Validity window of access tokens.
            refresh_token_ttl: Validity window of refresh tokens.

        Raises:
            ValueError: If secret_key is missing or too short. Raised at
                construction so the process refuses to start.
        """
        if len(secret_key.encode("utf-8")) < MIN_SECRET_KEY_BYTES:
            msg = "Token secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)
        self._secret_key = secret_key
        self._access_ttl = access_token_ttl
        self._refresh_ttl = refresh_token_ttl
        self._algorithm = "HS256"

    def issue_access_token(self, identity: Identity) -> str:
        """Issue an access token embedding an identity snapshot.

        Raises:
            SigningError: If the payload cannot be encoded.
        """
        return self._encode(
            ACCESS_TOKEN_TYPE, self._access_ttl, {"identity": identity.to_claims()}
        )

    def issue_refresh_token(self, owner_id: UUID) -> str:
        """Issue a refresh token bound to ``owner_id``.

        Raises:
            SigningError: If the payload cannot be encoded.
        """
        return self._encode(
            REFRESH_TOKEN_TYPE, self._refresh_ttl, {"owner_id": str(owner_id)}
        )

    def verify_access_token(
        self, token: str
    ) -> Result[AccessTokenPayload, TokenError]:
        match self._decode(token, ACCESS_TOKEN_TYPE):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=claims):
                try:
                    raw = claims["identity"]
                    identity = Identity(
                        id=UUID(raw["id"]),
                        username=str(raw["username"]),
                        email=str(raw["email"]),
                    )
                except (KeyError, TypeError, ValueError):
                    return Failure(error=TokenError.MALFORMED)
                return Success(
                    value=AccessTokenPayload(
                        identity=identity,
                        issued_at=datetime.fromtimestamp(claims["iat"], UTC),
                        expires_at=datetime.fromtimestamp(claims["exp"], UTC),
                        jti=str(claims.get("jti", "")),
                    )
                )
            case _:
                # Unreachable but needed for type checker
                return Failure(error=TokenError.MALFORMED)

    def verify_refresh_token(
        self, token: str
    ) -> Result[RefreshTokenPayload, TokenError]:
        match self._decode(token, REFRESH_TOKEN_TYPE):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=claims):
                try:
                    owner_id = UUID(claims["owner_id"])
                except (KeyError, TypeError, ValueError):
                    return Failure(error=TokenError.MALFORMED)
                return Success(
                    value=RefreshTokenPayload(
                        owner_id=owner_id,
                        issued_at=datetime.fromtimestamp(claims["iat"], UTC),
                        expires_at=datetime.fromtimestamp(claims["exp"], UTC),
                        jti=str(claims.get("jti", "")),
                    )
                )
            case _:
                # Unreachable but needed for type checker
                return Failure(error=TokenError.MALFORMED)

    def _encode(self, token_type: str, ttl: timedelta, claims: dict[str, Any]) -> str:
        now = datetime.now(UTC)
        payload = {
            "typ": token_type,
            "iat": int(now.timestamp()),
            "exp": int((now + ttl).timestamp()),
            "jti": str(uuid7()),
            **claims,
        }
        try:
            token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        except (TypeError, ValueError, jwt.PyJWTError) as e:
            raise SigningError(f"Failed to sign {token_type} token") from e
        return token

    def _decode(
        self, token: str, expected_type: str
    ) -> Result[dict[str, Any], TokenError]:
        try:
            claims: dict[str, Any] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["exp", "iat", "typ"]},
            )
        # InvalidSignatureError subclasses DecodeError, so it must come first
        except InvalidSignatureError:
            return Failure(error=TokenError.INVALID_SIGNATURE)
        except ExpiredSignatureError:
            return Failure(error=TokenError.EXPIRED)
        except InvalidTokenError:
            return Failure(error=TokenError.MALFORMED)

        if claims.get("typ") != expected_type:
            return Failure(error=TokenError.MALFORMED)
        return Success(value=claims)

"""Decoded token payloads.

Two signed variants exist: access payloads carry an identity snapshot, refresh
payloads carry only the owner id. Both are valid only while
``issued_at <= now < expires_at`` and the signature checks out.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from postboard.domain.entities.identity import Identity


@dataclass(frozen=True, slots=True, kw_only=True)
class AccessTokenPayload:
    """Claims of a verified access token."""

    identity: Identity
    issued_at: datetime
    expires_at: datetime
    jti: str


@dataclass(frozen=True, slots=True, kw_only=True)
class RefreshTokenPayload:
    """Claims of a verified refresh token."""

    owner_id: UUID
    issued_at: datetime
    expires_at: datetime
    jti: str

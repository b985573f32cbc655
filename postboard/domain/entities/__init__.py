"""Domain entities.

Usage:
    from postboard.domain.entities import Identity, UserRecord, Post
"""

from postboard.domain.entities.identity import Identity, UserRecord
from postboard.domain.entities.post import Post
from postboard.domain.entities.token_payload import (
    AccessTokenPayload,
    RefreshTokenPayload,
)

__all__ = [
    "Identity",
    "UserRecord",
    "Post",
    "AccessTokenPayload",
    "RefreshTokenPayload",
]

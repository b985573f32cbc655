"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from postboard.domain.protocols import TokenCodecProtocol, UserRepository
"""

# Service protocols
from postboard.domain.protocols.access_token_cache_protocol import (
    AccessTokenCacheProtocol,
)
from postboard.domain.protocols.cache_protocol import CacheProtocol
from postboard.domain.protocols.logger_protocol import LoggerProtocol
from postboard.domain.protocols.password_hashing_protocol import (
    PasswordHashingProtocol,
)
from postboard.domain.protocols.token_codec_protocol import TokenCodecProtocol

# Repository protocols
from postboard.domain.protocols.post_repository import PostRepository
from postboard.domain.protocols.refresh_token_repository import (
    RefreshTokenRepository,
)
from postboard.domain.protocols.user_repository import UserRepository

__all__ = [
    "AccessTokenCacheProtocol",
    "CacheProtocol",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "TokenCodecProtocol",
    "PostRepository",
    "RefreshTokenRepository",
    "UserRepository",
]

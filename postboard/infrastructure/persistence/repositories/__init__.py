"""Repository implementations.

Usage:
    from postboard.infrastructure.persistence.repositories import UserRepository
"""

from postboard.infrastructure.persistence.repositories.post_repository import (
    PostRepository,
)
from postboard.infrastructure.persistence.repositories.refresh_token_repository import (
    RefreshTokenRepository,
)
from postboard.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = ["PostRepository", "RefreshTokenRepository", "UserRepository"]

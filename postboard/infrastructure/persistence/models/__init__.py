"""Database models.

Importing this package registers every table on ``BaseModel.metadata``
(used by Alembic autogenerate and ``Database.create_all``).
"""

from postboard.infrastructure.persistence.base import BaseModel
from postboard.infrastructure.persistence.models.post import Post
from postboard.infrastructure.persistence.models.refresh_token import RefreshToken
from postboard.infrastructure.persistence.models.user import User

__all__ = ["BaseModel", "Post", "RefreshToken", "User"]

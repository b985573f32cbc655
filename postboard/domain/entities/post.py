"""Post entity persisted by the content service."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True, slots=True, kw_only=True)
class Post:
    """A published post.

    Attributes:
        id: Unique post identifier.
        user_id: Owner's user identifier.
        username: Owner's username at creation time.
        title: Post title.
        content: Post body.
        created_at: Creation timestamp.
    """

    id: UUID
    user_id: UUID
    username: str
    title: str
    content: str
    created_at: datetime

    def is_owned_by(self, user_id: UUID) -> bool:
        """Check whether ``user_id`` owns this post."""
        return self.user_id == user_id

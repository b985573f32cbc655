"""Post commands executed by the content service on behalf of a verified identity."""

from dataclasses import dataclass
from uuid import UUID

from postboard.domain.entities import Identity


@dataclass(frozen=True, kw_only=True)
class CreatePost:
    """Publish a new post owned by ``author``."""

    author: Identity
    title: str
    content: str


@dataclass(frozen=True, kw_only=True)
class UpdatePost:
    """Edit a post. Only the owner may update it.

    Attributes:
        author: Verified caller.
        post_id: Target post.
        title: New title, or None to keep the current one.
        content: New content, or None to keep the current one.
    """

    author: Identity
    post_id: UUID
    title: str | None = None
    content: str | None = None


@dataclass(frozen=True, kw_only=True)
class DeletePost:
    """Delete a post. Only the owner may delete it."""

    author: Identity
    post_id: UUID

"""PostRepository protocol (port) for domain layer."""

from typing import Protocol
from uuid import UUID

from postboard.core.errors import DomainError
from postboard.core.result import Result
from postboard.domain.entities import Post


class PostRepository(Protocol):
    """Persistence operations for posts."""

    async def list_page(self, page: int, limit: int) -> Result[list[Post], DomainError]:
        """Return one page of posts, newest first.

        Args:
            page: 1-based page number.
            limit: Page size.
        """
        ...

    async def find_by_id(self, post_id: UUID) -> Result[Post | None, DomainError]:
        """Find post by ID."""
        ...

    async def create(
        self, user_id: UUID, username: str, title: str, content: str
    ) -> Result[Post, DomainError]:
        """Insert a new post."""
        ...

    async def update(
        self, post_id: UUID, title: str | None, content: str | None
    ) -> Result[Post, DomainError]:
        """Update title and/or content. ``None`` leaves a field unchanged."""
        ...

    async def delete(self, post_id: UUID) -> Result[None, DomainError]:
        """Delete post by ID."""
        ...

"""Post queries (public, no identity required)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class ListPosts:
    """One page of posts.

    Attributes:
        page: 1-based page number.
        limit: Page size.
    """

    page: int = 1
    limit: int = 10


@dataclass(frozen=True, kw_only=True)
class GetPost:
    """Single post by id."""

    post_id: UUID

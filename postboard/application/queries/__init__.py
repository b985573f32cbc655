"""Queries (CQRS read operations)."""

from postboard.application.queries.post_queries import GetPost, ListPosts

__all__ = ["GetPost", "ListPosts"]

"""Errors shared by the repositories.

- NotFoundError: a lookup matched nothing (unknown refresh token, post)
- ConflictError: a unique username or email was already taken
"""

from dataclasses import dataclass

from postboard.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Nothing matched the lookup.

    Attributes:
        resource_type: ``RefreshToken`` or ``Post``.
        resource_id: Identifier that was looked up (never a token string).
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """A unique user attribute is already registered."""

    resource_type: str
    conflicting_field: str | None = None

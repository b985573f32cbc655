"""Errors returned by the PostgreSQL and Redis adapters.

Adapters catch driver exceptions at the boundary and hand these back inside
``Failure``. Handlers map any of them to ``backend_unavailable``, except a
cache miss on the access token slot, which is an ordinary rejection.
"""

from dataclasses import dataclass
from typing import Any

from postboard.core.errors import DomainError
from postboard.infrastructure.enums import InfrastructureErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class InfrastructureError(DomainError):
    """Backend failure with the driver-level reason attached."""

    infrastructure_code: InfrastructureErrorCode | None = None
    details: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class DatabaseError(InfrastructureError):
    """A SQLAlchemy call failed (see ``persistence.errors.to_database_error``)."""


@dataclass(frozen=True, slots=True, kw_only=True)
class CacheError(InfrastructureError):
    """A Redis call failed, or a required key was absent.

    An absent key is reported with ``InfrastructureErrorCode.CACHE_MISS``.
    """

    @property
    def is_miss(self) -> bool:
        """True when the error reports an absent key rather than a backend fault."""
        return self.infrastructure_code == InfrastructureErrorCode.CACHE_MISS

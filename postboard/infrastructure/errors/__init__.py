"""Infrastructure errors.

Usage:
    from postboard.infrastructure.errors import CacheError, DatabaseError
"""

from postboard.infrastructure.errors.infrastructure_error import (
    CacheError,
    DatabaseError,
    InfrastructureError,
)

__all__ = ["InfrastructureError", "DatabaseError", "CacheError"]

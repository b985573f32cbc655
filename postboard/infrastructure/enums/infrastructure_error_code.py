"""Why a database or cache call failed.

Carried next to the domain ``ErrorCode`` so logs keep the backend-level reason
while handlers only branch on the domain code (or on ``CacheError.is_miss``).
"""

from enum import Enum


class InfrastructureErrorCode(Enum):
    """Backend failure reasons."""

    DATABASE_CONSTRAINT_VIOLATION = "database_constraint_violation"
    DATABASE_ERROR = "database_error"

    CACHE_CONNECTION_ERROR = "cache_connection_error"
    CACHE_MISS = "cache_miss"
    CACHE_GET_ERROR = "cache_get_error"
    CACHE_SET_ERROR = "cache_set_error"
    CACHE_DELETE_ERROR = "cache_delete_error"

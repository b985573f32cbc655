"""Machine-readable codes carried by ``DomainError``.

Handlers translate these into their own outcome constants; they never reach
an HTTP or RPC response directly.
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain error codes, grouped by what went wrong."""

    # Lookups that came back empty
    POST_NOT_FOUND = "post_not_found"
    REFRESH_TOKEN_NOT_FOUND = "refresh_token_not_found"

    # Unique username/email violated on insert
    USER_ALREADY_EXISTS = "user_already_exists"

    # Cached access token present but unusable
    TOKEN_INVALID = "token_invalid"

    # Backing stores
    DATABASE_UNAVAILABLE = "database_unavailable"
    CACHE_UNAVAILABLE = "cache_unavailable"

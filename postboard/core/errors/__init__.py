"""Core errors package.

Usage:
    from postboard.core.errors import DomainError, NotFoundError
"""

from postboard.core.errors.common_errors import ConflictError, NotFoundError
from postboard.core.errors.domain_error import DomainError

__all__ = ["ConflictError", "DomainError", "NotFoundError"]

"""Domain error types."""

from postboard.domain.errors.auth_failure import AuthFailure
from postboard.domain.errors.token_error import SigningError, TokenError

__all__ = ["AuthFailure", "SigningError", "TokenError"]

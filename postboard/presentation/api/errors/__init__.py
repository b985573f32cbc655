"""REST error handling.

Exports:
    UnauthorizedError: Raised by identity dependencies (uniform 401)
    failure_response: Build a JSON error response for a handler failure
    register_exception_handlers: Register all exception handlers with an app
"""

from postboard.presentation.api.errors.error_responses import (
    UnauthorizedError,
    failure_response,
)
from postboard.presentation.api.errors.exception_handlers import (
    register_exception_handlers,
)

__all__ = ["UnauthorizedError", "failure_response", "register_exception_handlers"]

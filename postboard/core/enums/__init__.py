"""Core enums package.

Usage:
    from postboard.core.enums import ErrorCode, Environment
"""

from postboard.core.enums.environment import Environment
from postboard.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]

"""Result types for railway-oriented programming.

Operations that can fail return ``Success`` or ``Failure`` instead of raising,
which keeps expected failures (bad credentials, expired tokens, cache misses)
explicit at every call site.

Usage:
    result = codec.verify_access_token(token)
    match result:
        case Success(value=payload):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]

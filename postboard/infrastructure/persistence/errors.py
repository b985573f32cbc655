"""Mapping of SQLAlchemy exceptions onto ``DatabaseError``."""

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from postboard.core.enums import ErrorCode
from postboard.infrastructure.enums import InfrastructureErrorCode
from postboard.infrastructure.errors import DatabaseError


def to_database_error(operation: str, exc: SQLAlchemyError) -> DatabaseError:
    """Wrap a SQLAlchemy exception raised during ``operation``.

    Args:
        operation: Short name of the failed operation (for logs and details).
        exc: Original exception.

    Returns:
        DatabaseError: Error with ``DATABASE_UNAVAILABLE`` domain code.
    """
    infrastructure_code = (
        InfrastructureErrorCode.DATABASE_CONSTRAINT_VIOLATION
        if isinstance(exc, IntegrityError)
        else InfrastructureErrorCode.DATABASE_ERROR
    )
    return DatabaseError(
        code=ErrorCode.DATABASE_UNAVAILABLE,
        infrastructure_code=infrastructure_code,
        message=f"Database operation '{operation}' failed",
        details={"operation": operation, "error_type": type(exc).__name__},
    )

"""User database model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from postboard.infrastructure.persistence.base import BaseMutableModel


class User(BaseMutableModel):
    """Registered user.

    Fields:
        id, created_at, updated_at: From BaseMutableModel
        username: Unique login name
        email: Unique email (stored lowercase)
        password_hash: Bcrypt hash (NEVER plaintext)
    """

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(
        String(100),
        unique=True,
        index=True,
        nullable=False,
    )
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
    )
    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password (NEVER plaintext)",
    )

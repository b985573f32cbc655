"""Refresh token database model.

One row per issued refresh token. Rows are matched on the exact signed token
string plus owner and are never updated. The ``(owner_id, token)`` index is
not unique because a duplicate insert is allowed.
"""

from uuid import UUID

from sqlalchemy import ForeignKey, Index, Text
from sqlalchemy.orm import Mapped, mapped_column

from postboard.infrastructure.persistence.base import BaseModel


class RefreshToken(BaseModel):
    """Issued refresh token (immutable, no updated_at).

    Fields:
        id: UUID primary key (from BaseModel)
        created_at: Issue timestamp (from BaseModel)
        owner_id: Foreign key to users table (cascade delete)
        token: Signed refresh token string
    """

    __tablename__ = "refresh_tokens"
    __table_args__ = (
        Index("idx_refresh_tokens_owner_token", "owner_id", "token"),
    )

    owner_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        comment="User the token was issued to",
    )
    token: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Signed refresh token",
    )

"""Identity and user record entities.

``Identity`` is the snapshot of user attributes carried inside an access
token. ``UserRecord`` is the canonical stored user, which additionally holds
the password hash. The snapshot may drift from the record after issuance.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, slots=True, kw_only=True)
class Identity:
    """Verified caller identity.

    Attributes:
        id: Unique user identifier.
        username: Login username.
        email: Email address.
    """

    id: UUID
    username: str
    email: str

    def to_claims(self) -> dict[str, str]:
        """Serialize identity for embedding in a token payload."""
        return {"id": str(self.id), "username": self.username, "email": self.email}


@dataclass(frozen=True, slots=True, kw_only=True)
class UserRecord:
    """Stored user with credential material.

    Attributes:
        id: Unique user identifier.
        username: Login username.
        email: Email address.
        password_hash: Bcrypt hash (never plaintext).
    """

    id: UUID
    username: str
    email: str
    password_hash: str

    @property
    def identity(self) -> Identity:
        """Identity snapshot of this record (drops the password hash)."""
        return Identity(id=self.id, username=self.username, email=self.email)

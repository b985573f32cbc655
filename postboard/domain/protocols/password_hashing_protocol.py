"""Password hashing protocol for domain layer.

Opaque one-way hash and verify capability. Infrastructure provides the
bcrypt implementation.
"""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Password hashing and verification interface.

    Usage:
        password_hash = password_service.hash_password("correct-horse")
        is_valid = password_service.verify_password("correct-horse", password_hash)
    """

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password.

        Returns:
            Hashed password string (bcrypt format: $2b$12$...).
        """
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a hash.

        Returns:
            True if password matches hash, False otherwise (never raises).
        """
        ...

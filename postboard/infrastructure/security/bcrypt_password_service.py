"""Bcrypt password hashing service (adapter).

Implements PasswordHashingProtocol using bcrypt. The cost factor comes from
``Settings.bcrypt_rounds`` (12 in production, lower in tests).
"""

import bcrypt


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        from postboard.core.container import get_password_service

        password_service = get_password_service()
        password_hash = password_service.hash_password("correct-horse")
        is_valid = password_service.verify_password("correct-horse", password_hash)
    """

    def __init__(self, cost_factor: int = 12) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt cost factor (log2 of iterations, 4..31).

        Raises:
            ValueError: If cost_factor is outside bcrypt's supported range.
        """
        if not 4 <= cost_factor <= 31:
            msg = "Cost factor must be between 4 and 31"
            raise ValueError(msg)
        self._cost_factor = cost_factor

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password using bcrypt.

        Returns:
            Hashed password string (bcrypt format: $2b$<cost>$...).
        """
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a bcrypt hash.

        Returns:
            True if password matches hash, False otherwise (including a
            malformed hash or an over-long password).
        """
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"), password_hash.encode("utf-8")
            )
        except ValueError:
            return False

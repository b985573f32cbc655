"""Security adapters (token signing, password hashing)."""

from postboard.infrastructure.security.bcrypt_password_service import (
    BcryptPasswordService,
)
from postboard.infrastructure.security.jwt_token_codec import JWTTokenCodec

__all__ = ["BcryptPasswordService", "JWTTokenCodec"]

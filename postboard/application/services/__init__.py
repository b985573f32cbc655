"""Application services."""

from postboard.application.services.identity_verifier import IdentityVerifier

__all__ = ["IdentityVerifier"]

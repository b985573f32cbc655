"""Token verification failures.

Returned directly by the token codec as a tagged variant. Callers branch on
the member, never on exception text.
"""

from enum import Enum


class TokenError(Enum):
    """Why a signed token was rejected.

    Signature is checked before expiry, so a token signed with a foreign
    secret is always ``INVALID_SIGNATURE`` even when it is also expired.
    """

    EXPIRED = "expired"
    INVALID_SIGNATURE = "invalid_signature"
    MALFORMED = "malformed"


class SigningError(Exception):
    """Raised when a token cannot be serialized or signed.

    Only expected for a misconfigured secret or unserializable claims. Treated
    as fatal: startup aborts, and at request time it surfaces as a 500.
    """

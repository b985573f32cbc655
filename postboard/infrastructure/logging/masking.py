"""structlog processor that scrubs credentials from log events.

Usernames and the local part of email addresses keep their first three
characters. Passwords and token-bearing fields are redacted entirely.
"""

from typing import Any

MASK = "***"
USERNAME_VISIBLE_CHARS = 3

_REDACTED_KEYS = frozenset(
    {
        "password",
        "password_hash",
        "secret_key",
        "token",
        "access_token",
        "refresh_token",
    }
)


def mask_username(username: str) -> str:
    """Keep the first three characters of ``username`` and mask the rest.

    Example:
        >>> mask_username("alice01")
        'ali***'
    """
    return f"{username[:USERNAME_VISIBLE_CHARS]}{MASK}"


def mask_email(email: str) -> str:
    """Mask the local part of ``email`` like a username; the domain stays.

    Example:
        >>> mask_email("alice@example.com")
        'ali***@example.com'
    """
    local, at, domain = email.partition("@")
    return f"{mask_username(local)}{at}{domain}"


def mask_sensitive_fields(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """structlog processor applying the masking rules to every event."""
    for key, value in event_dict.items():
        if key in _REDACTED_KEYS:
            event_dict[key] = MASK
        elif not isinstance(value, str):
            continue
        elif key == "username":
            event_dict[key] = mask_username(value)
        elif key == "email":
            event_dict[key] = mask_email(value)
    return event_dict

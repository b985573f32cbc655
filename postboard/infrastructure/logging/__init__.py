"""Structured logging adapters."""

from postboard.infrastructure.logging.console_adapter import ConsoleAdapter
from postboard.infrastructure.logging.masking import (
    mask_email,
    mask_sensitive_fields,
    mask_username,
)

__all__ = ["ConsoleAdapter", "mask_email", "mask_sensitive_fields", "mask_username"]

"""Validation and normalization utilities for shortlink."""

from enum import Enum
from typing import Optional, Tuple


class NotificationType(Enum):
    """How a submitting user wishes to be notified."""

    EMAIL = "EMAIL"
    SMS = "SMS"
    PUSH = "PUSH"
    WHATSAPP = "WHATSAPP"


MISSING_PARAMETERS_MESSAGE = "Missing parameters: originalUrl, username, or notificationType"


def parse_notification_type(value: object) -> Tuple[Optional[NotificationType], str]:
    """Match a notification type case-insensitively.

    Args:
        value: Raw value from the request

    Returns:
        Tuple of (notification_type or None, error_message)
    """
    if isinstance(value, NotificationType):
        return value, ""

    text = str(value)
    for member in NotificationType:
        if member.name.lower() == text.lower():
            return member, ""

    return None, f"Incorrect notification type: {text}"


def has_required_fields(*values: Optional[str]) -> bool:
    """Return True if every value is present and non-empty."""
    for value in values:
        if value is None:
            return False
        if isinstance(value, str) and not value:
            return False
    return True


def normalize_submitted_url(url: str) -> str:
    """Normalize a URL at submission time.

    Prepends ``https://`` only when neither ``http`` nor ``https`` appears
    anywhere in the string. This is a substring test, so ``example.com/httpfoo``
    is left untouched.
    """
    if "http" not in url and "https" not in url:
        return "https://" + url
    return url


def normalize_redirect_url(url: str) -> str:
    """Normalize a stored URL at redirect time (strict scheme-prefix test)."""
    if not url.startswith(("http://", "https://")):
        return "https://" + url
    return url

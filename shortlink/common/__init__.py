"""Common utilities for shortlink."""

from .validators import (
    NotificationType,
    parse_notification_type,
    normalize_submitted_url,
    normalize_redirect_url,
)
from .logging_config import setup_logging

__all__ = [
    "NotificationType",
    "parse_notification_type",
    "normalize_submitted_url",
    "normalize_redirect_url",
    "setup_logging",
]

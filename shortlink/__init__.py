"""Core business logic for shortlink."""

from .shortcode import ShortCodeGenerator
from .service import LinkService

__all__ = ["ShortCodeGenerator", "LinkService"]

"""Business logic service for shortlink."""

import logging
from typing import Dict, Optional

from .shortcode import ShortCodeGenerator
from .database.base import LinkStoreBase
from .database.models import Link
from .errors import NotFoundError, ValidationError
from .common.validators import (
    MISSING_PARAMETERS_MESSAGE,
    has_required_fields,
    normalize_redirect_url,
    normalize_submitted_url,
    parse_notification_type,
)


class LinkService:
    """Service layer for the create, redirect and delete policies."""

    def __init__(
        self,
        store: LinkStoreBase,
        short_code_generator: Optional[ShortCodeGenerator] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize link service.

        Args:
            store: Link store instance
            short_code_generator: Optional short code generator
            logger: Optional logger
        """
        self.store = store
        self.generator = short_code_generator or ShortCodeGenerator()
        self.logger = logger or logging.getLogger(__name__)

    async def create_or_reuse(
        self,
        original_url: Optional[str],
        username: Optional[str],
        notification_type: Optional[str],
    ) -> Link:
        """Return the link for a URL, creating one if none is stored yet.

        The lookup and the insert are separate store calls. Concurrent
        submissions of the same URL can therefore both insert.

        Args:
            original_url: The destination URL
            username: Submitting user, part of the salt
            notification_type: Notification type name, matched case-insensitively

        Returns:
            The existing or newly created link

        Raises:
            ValidationError: If a field is missing or the notification type is unknown
        """
        if not has_required_fields(original_url, username, notification_type):
            raise ValidationError(MISSING_PARAMETERS_MESSAGE)

        normalized_url = normalize_submitted_url(original_url)
        if normalized_url != original_url:
            self.logger.warning("The URL must contain 'http' or 'https'. Adding 'https://' to the URL.")

        kind, error = parse_notification_type(notification_type)
        if kind is None:
            self.logger.info(f"Invalid notification type: {notification_type}")
            raise ValidationError(error)

        self.logger.info(f"Searching for link with originalUrl: {normalized_url}")
        existing = await self.store.find_by_original_url(normalized_url)
        if existing is not None:
            self.logger.info(f"Reusing short code {existing.short_code} for {normalized_url}")
            return existing

        short_code, salt, created_at = self.generator.generate_for(username, kind)
        self.logger.info(f"Creating short link with shortCode: {short_code}")

        link = await self.store.create(
            Link(
                original_url=normalized_url,
                short_code=short_code,
                salt=salt,
                created_at=created_at,
            )
        )

        self.logger.info(f"Created short link: {link.short_code} -> {link.original_url}")
        return link

    async def get_by_short_code(self, short_code: str) -> Optional[Link]:
        """Get the link for a short code, or None."""
        self.logger.info(f"Searching for link with shortCode: {short_code}")
        return await self.store.find_by_code(short_code)

    async def resolve_redirect(self, short_code: str) -> str:
        """Get the redirect target for a short code.

        Args:
            short_code: The short code to resolve

        Returns:
            The stored URL, prefixed with https:// unless it starts with a scheme

        Raises:
            NotFoundError: If no link has this short code
        """
        link = await self.get_by_short_code(short_code)
        if link is None:
            self.logger.info(f"Short code not found: {short_code}")
            raise NotFoundError("Link not found")

        return normalize_redirect_url(link.original_url)

    async def delete_by_short_code(self, short_code: str) -> Link:
        """Delete the link for a short code.

        Args:
            short_code: The short code to delete

        Returns:
            The deleted link

        Raises:
            NotFoundError: If no link has this short code
        """
        link = await self.get_by_short_code(short_code)
        if link is None:
            self.logger.info(f"Short code not found: {short_code}")
            raise NotFoundError("Link not found")

        self.logger.info(f"Deleting link with shortCode: {link.short_code}")
        await self.store.delete(link)
        return link

    async def health_check(self) -> Dict[str, bool]:
        """Perform health check.

        Returns:
            Dictionary with health status
        """
        store_healthy = await self.store.health_check()

        return {
            "store": store_healthy,
            "overall": store_healthy,
        }

    async def close(self) -> None:
        """Close store connections."""
        await self.store.close()

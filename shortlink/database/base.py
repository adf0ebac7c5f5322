"""Abstract base class for link store implementations."""

from abc import ABC, abstractmethod
from typing import Optional

from .models import Link


class LinkStoreBase(ABC):
    """Abstract base class for link persistence.

    No store enforces uniqueness of ``short_code`` or ``original_url``. Where
    several records match a lookup, the first by insertion order wins.
    """

    def __init__(self, db_config: str):
        """Initialize store.

        Args:
            db_config: Connection string (empty for in-process stores)
        """
        self.db_config = db_config

    @abstractmethod
    async def create(self, link: Link) -> Link:
        """Insert a new link.

        Args:
            link: Link without an id

        Returns:
            The stored link, including its assigned id
        """
        pass

    @abstractmethod
    async def find_by_code(self, short_code: str) -> Optional[Link]:
        """Indexed exact-match lookup on short code.

        Args:
            short_code: The short code to lookup

        Returns:
            The first matching link or None
        """
        pass

    @abstractmethod
    async def find_by_original_url(self, original_url: str) -> Optional[Link]:
        """Exact-match lookup on original URL.

        Args:
            original_url: The stored (normalized) original URL

        Returns:
            The first matching link by insertion order, or None
        """
        pass

    @abstractmethod
    async def delete(self, link: Link) -> None:
        """Remove a link.

        Args:
            link: A stored link (must carry its id)

        Raises:
            NotFoundError: If the link is not present
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Return the number of stored links."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close store connections."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the store is healthy.

        Returns:
            True if healthy, False otherwise
        """
        pass

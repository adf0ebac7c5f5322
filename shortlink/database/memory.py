"""In-process link store."""

import asyncio
import itertools
import logging
from collections import OrderedDict
from typing import Dict, List, Optional

from ..errors import NotFoundError
from .base import LinkStoreBase
from .models import Link


class InMemoryLinkStore(LinkStoreBase):
    """Link store held in process memory. Contents are lost on restart."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        super().__init__("")
        self.logger = logger or logging.getLogger(__name__)

        # id -> link, in insertion order
        self._links: "OrderedDict[str, Link]" = OrderedDict()
        # short_code -> ids, in insertion order
        self._by_code: Dict[str, List[str]] = {}
        self._ids = itertools.count(1)
        self._lock = asyncio.Lock()

    async def create(self, link: Link) -> Link:
        async with self._lock:
            stored = link.with_id(str(next(self._ids)))
            self._links[stored.id] = stored
            self._by_code.setdefault(stored.short_code, []).append(stored.id)

        self.logger.debug(f"Stored link {stored.id}: {stored.short_code} -> {stored.original_url}")
        return stored

    async def find_by_code(self, short_code: str) -> Optional[Link]:
        ids = self._by_code.get(short_code)
        if not ids:
            return None
        return self._links[ids[0]]

    async def find_by_original_url(self, original_url: str) -> Optional[Link]:
        for link in self._links.values():
            if link.original_url == original_url:
                return link
        return None

    async def delete(self, link: Link) -> None:
        async with self._lock:
            if link.id is None or link.id not in self._links:
                raise NotFoundError("Link not found!")

            stored = self._links.pop(link.id)
            ids = self._by_code[stored.short_code]
            ids.remove(stored.id)
            if not ids:
                del self._by_code[stored.short_code]

        self.logger.debug(f"Removed link {link.id}")

    async def count(self) -> int:
        return len(self._links)

    async def close(self) -> None:
        """Nothing to release; stored links stay readable."""
        pass

    async def health_check(self) -> bool:
        return True

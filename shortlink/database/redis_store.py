"""Redis implementation of the link store."""

import hashlib
import logging
from contextlib import asynccontextmanager
from typing import Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from ..errors import InternalError, NotFoundError
from .base import LinkStoreBase
from .models import Link


class RedisLinkStore(LinkStoreBase):
    """Link store backed by Redis.

    Layout (all keys under ``key_prefix``):
        seq             -- INCR counter, source of ids and insertion order
        link:{id}       -- hash with the link fields
        code:{code}     -- sorted set of ids sharing a short code, scored by id
        url:{sha256}    -- sorted set of ids sharing an original URL, scored by id
        links           -- sorted set of every id
    """

    def __init__(
        self,
        redis_url: str,
        key_prefix: str = "shortlink",
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize Redis store.

        Args:
            redis_url: Redis connection URL (e.g., redis://localhost:6379/0)
            key_prefix: Namespace for every key written
            logger: Optional logger instance
        """
        super().__init__(redis_url)
        self.key_prefix = key_prefix
        self.logger = logger or logging.getLogger(__name__)
        self.client: Optional[redis.Redis] = None

    async def connect(self) -> None:
        """Connect to Redis."""
        self.client = redis.from_url(
            self.db_config,
            encoding="utf-8",
            decode_responses=True,
        )
        async with self._guard():
            await self.client.ping()
        self.logger.info("Connected to Redis")

    @asynccontextmanager
    async def _guard(self):
        """Translate client faults into InternalError."""
        if self.client is None:
            raise InternalError("Redis store is not connected")
        try:
            yield self.client
        except RedisError as e:
            self.logger.error(f"Redis error: {e}", exc_info=True)
            raise InternalError(f"Store failure: {e}") from e

    def _key(self, *parts: str) -> str:
        return ":".join((self.key_prefix,) + parts)

    def _url_key(self, original_url: str) -> str:
        # Hash keeps arbitrarily long URLs out of the key space
        return self._key("url", hashlib.sha256(original_url.encode("utf-8")).hexdigest())

    async def _load(self, client: redis.Redis, link_id: str) -> Optional[Link]:
        data = await client.hgetall(self._key("link", link_id))
        if not data:
            return None
        return Link.from_dict({**data, "id": link_id})

    async def _first(self, index_key: str) -> Optional[Link]:
        async with self._guard() as client:
            ids = await client.zrange(index_key, 0, 0)
            if not ids:
                return None
            return await self._load(client, ids[0])

    async def create(self, link: Link) -> Link:
        async with self._guard() as client:
            seq = await client.incr(self._key("seq"))
            stored = link.with_id(str(seq))
            record = stored.to_dict()
            del record["id"]

            async with client.pipeline(transaction=True) as pipe:
                pipe.hset(self._key("link", stored.id), mapping=record)
                pipe.zadd(self._key("code", stored.short_code), {stored.id: seq})
                pipe.zadd(self._url_key(stored.original_url), {stored.id: seq})
                pipe.zadd(self._key("links"), {stored.id: seq})
                await pipe.execute()

        self.logger.debug(f"Stored link {stored.id}: {stored.short_code} -> {stored.original_url}")
        return stored

    async def find_by_code(self, short_code: str) -> Optional[Link]:
        return await self._first(self._key("code", short_code))

    async def find_by_original_url(self, original_url: str) -> Optional[Link]:
        return await self._first(self._url_key(original_url))

    async def delete(self, link: Link) -> None:
        if link.id is None:
            raise NotFoundError("Link not found!")

        async with self._guard() as client:
            stored = await self._load(client, link.id)
            if stored is None:
                raise NotFoundError("Link not found!")

            async with client.pipeline(transaction=True) as pipe:
                pipe.delete(self._key("link", stored.id))
                pipe.zrem(self._key("code", stored.short_code), stored.id)
                pipe.zrem(self._url_key(stored.original_url), stored.id)
                pipe.zrem(self._key("links"), stored.id)
                deleted, *_ = await pipe.execute()

        if not deleted:
            raise NotFoundError("Link not found!")

    async def count(self) -> int:
        async with self._guard() as client:
            return await client.zcard(self._key("links"))

    async def health_check(self) -> bool:
        try:
            async with self._guard() as client:
                await client.ping()
            return True
        except InternalError as e:
            self.logger.error(f"Health check failed: {e}")
            return False

    async def close(self) -> None:
        """Close Redis connection."""
        if self.client:
            await self.client.aclose()
            self.client = None
            self.logger.info("Redis connection closed")

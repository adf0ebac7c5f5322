"""Store layer for shortlink."""

import logging
from typing import Optional

from .base import LinkStoreBase
from .memory import InMemoryLinkStore
from .models import Link
from .postgres import PostgresLinkStore
from .redis_store import RedisLinkStore

__all__ = [
    "Link",
    "LinkStoreBase",
    "InMemoryLinkStore",
    "PostgresLinkStore",
    "RedisLinkStore",
    "build_store",
]


def build_store(config, logger: Optional[logging.Logger] = None) -> LinkStoreBase:
    """Create the store selected by ``config.store_backend``.

    Redis stores are returned unconnected; call ``connect()`` before use.

    Raises:
        ValueError: If the backend is unknown or its connection URL is missing
    """
    backend = config.store_backend.lower()

    if backend == "memory":
        return InMemoryLinkStore(logger=logger)

    if backend == "redis":
        if not config.redis_url:
            raise ValueError("REDIS_URL must be set when STORE_BACKEND=redis")
        return RedisLinkStore(redis_url=config.redis_url, logger=logger)

    if backend == "postgres":
        if not config.database_url:
            raise ValueError("DATABASE_URL must be set when STORE_BACKEND=postgres")
        return PostgresLinkStore(
            db_config=config.database_url,
            pool_max_size=config.database_pool_max_size,
            create_tables=config.database_create_tables,
            logger=logger,
        )

    raise ValueError(f"Unknown store backend: {config.store_backend}")

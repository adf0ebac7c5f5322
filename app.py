#!/usr/bin/env python3
"""
Main entry point for the shortlink service.

Usage:
    python app.py

Environment variables:
    STORE_BACKEND - memory, redis or postgres
    REDIS_URL - Redis connection URL (STORE_BACKEND=redis)
    DATABASE_URL - PostgreSQL connection URL (STORE_BACKEND=postgres)
    DATABASE_CREATE_TABLES - Set to true to create the links table on first use
    HOST / PORT - Address to listen on
    WORKERS - Number of uvicorn worker processes (default 1)
    LOG_LEVEL - Logging level
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import load_config
from shortlink.database import RedisLinkStore, build_store
from shortlink.service import LinkService
from shortlink.shortcode import ShortCodeGenerator
from shortlink.common.logging_config import setup_logging
from web_app import create_app


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the store on startup and close it on shutdown."""
    config = app.state.config
    logger = app.state.logger

    logger.info(f"Starting shortlink service with {config.store_backend} store...")

    store = build_store(config, logger=logger)
    if isinstance(store, RedisLinkStore):
        logger.info(f"Connecting to Redis at {config.redis_url}")
        await store.connect()

    service = LinkService(
        store=store,
        short_code_generator=ShortCodeGenerator(),
        logger=logger,
    )

    app.state.store = store
    app.state.service = service

    logger.info("Service started successfully")

    yield

    logger.info("Shutting down shortlink service...")
    await service.close()
    logger.info("Service stopped")


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("Shortlink Service")
    logger.info(f"Configuration: {config.model_dump(exclude={'redis_url', 'database_url'})}")

    # Store and service are created in the lifespan
    app = create_app(
        store_instance=None,
        service_instance=None,
        config=config,
    )

    app.state.config = config
    app.state.logger = logger
    app.router.lifespan_context = lifespan

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        workers=config.workers,
        log_level=config.log_level.lower(),
        access_log=True,
    )

    server = uvicorn.Server(uvicorn_config)

    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()

"""Pytest configuration and fixtures."""

import pytest
from datetime import datetime
from typing import AsyncGenerator

from httpx import ASGITransport, AsyncClient

from config import Config
from shortlink.database.memory import InMemoryLinkStore
from shortlink.service import LinkService
from shortlink.shortcode import ShortCodeGenerator
from shortlink.common.logging_config import setup_logging
from web_app import create_app


FIXED_NOW = datetime(2024, 1, 1, 12, 0, 0, 123456)


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def fixed_clock():
    """Clock that always returns FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def short_code_generator(fixed_clock):
    """Create short code generator with a frozen clock."""
    return ShortCodeGenerator(clock=fixed_clock)


@pytest.fixture
async def store(logger) -> AsyncGenerator[InMemoryLinkStore, None]:
    """Create in-memory store instance."""
    store = InMemoryLinkStore(logger=logger)

    yield store

    await store.close()


@pytest.fixture
def service(store, short_code_generator, logger) -> LinkService:
    """Create service instance."""
    return LinkService(
        store=store,
        short_code_generator=short_code_generator,
        logger=logger,
    )


@pytest.fixture
def app(store, service):
    """Create test FastAPI app."""
    return create_app(
        store_instance=store,
        service_instance=service,
        config=Config(store_backend="memory"),
    )


@pytest.fixture
async def client(app):
    """Create test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_submission():
    """A valid submission body."""
    return {
        "originalUrl": "https://a.com",
        "username": "bob",
        "notificationType": "EMAIL",
    }

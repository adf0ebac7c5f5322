"""Tests for service layer."""

from datetime import datetime

import pytest

from shortlink.errors import NotFoundError, ValidationError
from shortlink.shortcode import ShortCodeGenerator


class TestLinkService:
    """Test link service policies."""

    @pytest.mark.asyncio
    async def test_create_short_link(self, service, store):
        """Test creating a short link."""
        link = await service.create_or_reuse("https://a.com", "bob", "EMAIL")

        assert ShortCodeGenerator.is_valid_format(link.short_code)
        assert link.original_url == "https://a.com"
        assert link.salt == "bob2024-01-01T12:00:00.123456EMAIL"
        assert link.created_at == datetime(2024, 1, 1, 12, 0, 0, 123456)
        assert link.id is not None
        assert await store.count() == 1

    @pytest.mark.asyncio
    async def test_resubmission_reuses_code(self, service, store):
        """Same URL twice gives one record and one code."""
        first = await service.create_or_reuse("https://a.com", "bob", "EMAIL")
        second = await service.create_or_reuse("https://a.com", "alice", "SMS")

        assert second.short_code == first.short_code
        assert second.id == first.id
        assert await store.count() == 1

    @pytest.mark.asyncio
    async def test_url_without_scheme_is_prefixed(self, service):
        link = await service.create_or_reuse("example.com/path", "bob", "EMAIL")
        assert link.original_url == "https://example.com/path"

    @pytest.mark.asyncio
    async def test_url_containing_http_is_not_prefixed(self, service):
        link = await service.create_or_reuse("example.com/httpfoo", "bob", "EMAIL")
        assert link.original_url == "example.com/httpfoo"

    @pytest.mark.asyncio
    async def test_reuse_compares_normalized_url(self, service, store):
        """'a.com' and 'https://a.com' are the same after normalization."""
        first = await service.create_or_reuse("https://a.com", "bob", "EMAIL")
        second = await service.create_or_reuse("a.com", "bob", "EMAIL")

        assert second.short_code == first.short_code
        assert await store.count() == 1

    @pytest.mark.asyncio
    async def test_lowercase_notification_type(self, service):
        link = await service.create_or_reuse("https://a.com", "bob", "email")
        assert link.salt.endswith("EMAIL")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "url, username, kind",
        [
            (None, "bob", "EMAIL"),
            ("https://a.com", None, "EMAIL"),
            ("https://a.com", "bob", None),
            ("", "bob", "EMAIL"),
        ],
    )
    async def test_missing_fields(self, service, store, url, username, kind):
        with pytest.raises(ValidationError, match="Missing parameters"):
            await service.create_or_reuse(url, username, kind)
        assert await store.count() == 0

    @pytest.mark.asyncio
    async def test_unknown_notification_type(self, service, store):
        with pytest.raises(ValidationError, match="Incorrect notification type: FAX"):
            await service.create_or_reuse("https://a.com", "bob", "FAX")
        assert await store.count() == 0

    @pytest.mark.asyncio
    async def test_same_salt_different_urls_collide(self, service, store):
        """No retry on collision: both records keep the same code."""
        first = await service.create_or_reuse("https://a.com", "bob", "EMAIL")
        second = await service.create_or_reuse("https://b.com", "bob", "EMAIL")

        assert first.short_code == second.short_code
        assert first.id != second.id
        assert await store.count() == 2

        # Redirect follows the earliest record
        assert await service.resolve_redirect(first.short_code) == "https://a.com"

    @pytest.mark.asyncio
    async def test_resolve_redirect(self, service):
        link = await service.create_or_reuse("https://a.com", "bob", "EMAIL")
        assert await service.resolve_redirect(link.short_code) == "https://a.com"

    @pytest.mark.asyncio
    async def test_resolve_redirect_adds_scheme(self, service):
        """Stored 'example.com/httpfoo' redirects to an https URL."""
        link = await service.create_or_reuse("example.com/httpfoo", "bob", "EMAIL")
        assert await service.resolve_redirect(link.short_code) == "https://example.com/httpfoo"

    @pytest.mark.asyncio
    async def test_resolve_missing(self, service):
        with pytest.raises(NotFoundError):
            await service.resolve_redirect("000000000000")

    @pytest.mark.asyncio
    async def test_get_by_short_code(self, service):
        link = await service.create_or_reuse("https://a.com", "bob", "EMAIL")

        assert await service.get_by_short_code(link.short_code) == link
        assert await service.get_by_short_code("000000000000") is None

    @pytest.mark.asyncio
    async def test_delete(self, service, store):
        link = await service.create_or_reuse("https://a.com", "bob", "EMAIL")

        deleted = await service.delete_by_short_code(link.short_code)

        assert deleted == link
        assert await store.count() == 0
        with pytest.raises(NotFoundError):
            await service.delete_by_short_code(link.short_code)

    @pytest.mark.asyncio
    async def test_health_check(self, service):
        """Test health check."""
        health = await service.health_check()

        assert health == {"store": True, "overall": True}

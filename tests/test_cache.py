"""Tests for the in-memory TTL cache."""

from datetime import UTC, datetime, timedelta

from usda_nutrition.services.cache import InMemoryCache


def test_entries_expire_after_ttl() -> None:
    now = datetime(2024, 1, 15, tzinfo=UTC)
    cache = InMemoryCache(now=lambda: now)

    cache.set("fdc:food:1", "rice", ttl_seconds=60)
    assert cache.get("fdc:food:1") == "rice"

    now += timedelta(seconds=60)
    assert cache.get("fdc:food:1") is None
    assert len(cache) == 0


def test_missing_key_returns_none() -> None:
    assert InMemoryCache().get("missing") is None

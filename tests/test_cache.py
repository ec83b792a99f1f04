"""Tests for the namespaced word cache."""
from __future__ import annotations

from app.utils.cache import CacheBackend, build_cache_key


def test_build_cache_key_is_order_independent():
    assert build_cache_key(week=1, level=2) == build_cache_key(level=2, week=1)
    assert build_cache_key(week=1) != build_cache_key(week=2)


def test_set_and_get_round_trip():
    cache = CacheBackend()
    cache.set("words:list", "k", {"words": [{"text": "apple"}]}, ttl_seconds=60)

    assert cache.get("words:list", "k") == {"words": [{"text": "apple"}]}
    assert cache.get("words:item", "k") is None


def test_expired_entries_are_dropped(monkeypatch):
    cache = CacheBackend()
    monkeypatch.setattr("app.utils.cache.time.time", lambda: 1000.0)
    cache.set("words:list", "k", [1], ttl_seconds=5)

    monkeypatch.setattr("app.utils.cache.time.time", lambda: 1006.0)

    assert cache.get("words:list", "k") is None


def test_invalidate_only_touches_namespace():
    cache = CacheBackend()
    cache.set("words:list", "a", 1, ttl_seconds=60)
    cache.set("words:list", "b", 2, ttl_seconds=60)
    cache.set("words:item", "a", 3, ttl_seconds=60)

    cache.invalidate("words:list")

    assert cache.get("words:list", "a") is None
    assert cache.get("words:list", "b") is None
    assert cache.get("words:item", "a") == 3

"""Word read cache with optional Redis backing.

Entries live under a namespace such as ``words:list``. Invalidating a
namespace bumps its generation number, so every key written before the bump
stops matching. Stale Redis keys then simply age out through their TTL.
"""

from __future__ import annotations

import hashlib
import importlib
import importlib.util
import json
import threading
import time
from collections import defaultdict
from typing import Any, NamedTuple

from loguru import logger


def _json_default(value: Any) -> Any:
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


def build_cache_key(**components: Any) -> str:
    """Hash keyword components into a short, order-independent key."""

    payload = json.dumps(components, sort_keys=True, default=_json_default)
    return hashlib.sha1(payload.encode("utf-8")).hexdigest()


_redis_module = None
if importlib.util.find_spec("redis") is not None:
    _redis_module = importlib.import_module("redis")


class _Entry(NamedTuple):
    generation: int
    expires_at: float | None
    payload: str


class CacheBackend:
    """Namespaced JSON cache shared by the word endpoints."""

    def __init__(self, redis_url: str | None = None) -> None:
        self._lock = threading.Lock()
        self._entries: dict[str, dict[str, _Entry]] = defaultdict(dict)
        self._generations: dict[str, int] = defaultdict(int)
        self._redis = None
        if redis_url and _redis_module is not None:
            self._redis = _redis_module.Redis.from_url(redis_url, decode_responses=True)
            logger.info("Word cache backed by Redis")

    def _redis_call(self, method: str, *args: Any, **kwargs: Any) -> Any | None:
        if self._redis is None:
            return None
        try:
            return getattr(self._redis, method)(*args, **kwargs)
        except Exception as exc:
            logger.warning("Redis unavailable, using local cache only", error=str(exc))
            self._redis = None
            return None

    def _generation(self, namespace: str) -> int:
        remote = self._redis_call("get", f"{namespace}:generation")
        if remote is not None:
            return int(remote)
        return self._generations[namespace]

    def get(self, namespace: str, key: str) -> Any | None:
        generation = self._generation(namespace)
        remote = self._redis_call("get", f"{namespace}:{generation}:{key}")
        if remote is not None:
            return json.loads(remote)

        with self._lock:
            entry = self._entries[namespace].get(key)
            if entry is None:
                return None
            if entry.generation != generation or (
                entry.expires_at is not None and entry.expires_at < time.time()
            ):
                del self._entries[namespace][key]
                return None
            return json.loads(entry.payload)

    def set(self, namespace: str, key: str, value: Any, ttl_seconds: int) -> None:
        generation = self._generation(namespace)
        payload = json.dumps(value, default=_json_default)
        self._redis_call("set", f"{namespace}:{generation}:{key}", payload, ex=ttl_seconds or None)
        expires_at = time.time() + ttl_seconds if ttl_seconds else None
        with self._lock:
            self._entries[namespace][key] = _Entry(generation, expires_at, payload)

    def invalidate(self, namespace: str) -> None:
        """Forget every entry written to ``namespace`` so far."""

        self._redis_call("incr", f"{namespace}:generation")
        with self._lock:
            self._generations[namespace] += 1
            self._entries.pop(namespace, None)

    def clear(self) -> None:
        """Drop all local entries; Redis keys expire on their own."""

        with self._lock:
            self._entries.clear()


__all__ = ["CacheBackend", "build_cache_key"]

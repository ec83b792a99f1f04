"""Utility helpers package."""

from app.utils.cache import CacheBackend, build_cache_key
from app.utils.exceptions import EnglishGameError, NotFoundError, ProgressConflictError

__all__ = [
    "CacheBackend",
    "EnglishGameError",
    "NotFoundError",
    "ProgressConflictError",
    "build_cache_key",
]

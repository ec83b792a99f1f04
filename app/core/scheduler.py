"""Adaptive word scheduling.

Ranks a player's words by how much they need practice. The priority blends
the error rate with how long ago the word was last seen:

    priority = 0.7 * error_rate + 0.3 * min(days_since_seen, 5) / 5

Both terms lie in [0, 1], so the priority does as well. Higher priorities are
presented first. Equal priorities are ordered by ascending word id so that the
result is deterministic for a fixed ``now``.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Iterable

ERROR_WEIGHT = 0.7
RECENCY_WEIGHT = 0.3
RECENCY_HORIZON_DAYS = 5.0
DEFAULT_LIMIT = 10

_SECONDS_PER_DAY = 60 * 60 * 24


@dataclass(slots=True)
class ProgressEntry:
    """Attempt history for one word, as consumed by :func:`schedule_words`."""

    word_id: Any
    correct_count: int = 0
    incorrect_count: int = 0
    last_seen: datetime | None = None


@dataclass(slots=True, frozen=True)
class ScheduleItem:
    """A ranked word recommendation."""

    word_id: Any
    priority: float


def _ensure_timezone(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def compute_priority(entry: ProgressEntry, now: datetime) -> float:
    """Return the practice priority of ``entry`` relative to ``now``."""

    attempts = entry.correct_count + entry.incorrect_count or 1
    error_rate = entry.incorrect_count / attempts

    if entry.last_seen is None:
        days_since_seen = 0.0
    else:
        elapsed = _ensure_timezone(now) - _ensure_timezone(entry.last_seen)
        days_since_seen = elapsed.total_seconds() / _SECONDS_PER_DAY
    recency = max(0.0, min(days_since_seen, RECENCY_HORIZON_DAYS)) / RECENCY_HORIZON_DAYS

    return ERROR_WEIGHT * error_rate + RECENCY_WEIGHT * recency


def schedule_words(
    progress: Iterable[ProgressEntry],
    *,
    limit: int | None = None,
    now: datetime | None = None,
) -> list[ScheduleItem]:
    """Return up to ``limit`` words ordered by descending priority."""

    if limit is None:
        limit = DEFAULT_LIMIT
    if limit <= 0:
        return []

    now = now or datetime.now(timezone.utc)
    items = [
        ScheduleItem(word_id=entry.word_id, priority=compute_priority(entry, now))
        for entry in progress
    ]
    items.sort(key=lambda item: (-item.priority, str(item.word_id)))
    return items[:limit]

"""Unit tests for the adaptive word scheduler."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from app.core.scheduler import (
    DEFAULT_LIMIT,
    ProgressEntry,
    compute_priority,
    schedule_words,
)

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def _entries(count: int) -> list[ProgressEntry]:
    return [
        ProgressEntry(
            word_id=f"w{index:02d}",
            correct_count=index % 4,
            incorrect_count=index % 3,
            last_seen=NOW - timedelta(hours=index * 7),
        )
        for index in range(count)
    ]


def test_error_prone_word_is_ranked_first():
    schedule = schedule_words(
        [
            ProgressEntry("w1", correct_count=1, incorrect_count=5, last_seen=NOW - timedelta(hours=1)),
            ProgressEntry("w2", correct_count=4, incorrect_count=0, last_seen=NOW),
        ],
        now=NOW,
    )

    assert schedule[0].word_id == "w1"
    assert schedule[1].word_id == "w2"


def test_all_wrong_recent_word_beats_all_right_fresh_word():
    schedule = schedule_words(
        [
            ProgressEntry("fresh", correct_count=4, incorrect_count=0, last_seen=NOW),
            ProgressEntry("missed", correct_count=0, incorrect_count=5, last_seen=NOW - timedelta(hours=1)),
        ],
        now=NOW,
    )

    assert [item.word_id for item in schedule] == ["missed", "fresh"]
    assert schedule[0].priority > schedule[1].priority


def test_priority_formula():
    entry = ProgressEntry("w", correct_count=3, incorrect_count=1, last_seen=NOW - timedelta(days=2))

    assert compute_priority(entry, NOW) == pytest.approx(0.7 * 0.25 + 0.3 * 2 / 5)


def test_perfect_fresh_word_has_zero_priority():
    entry = ProgressEntry("w", correct_count=3, incorrect_count=0, last_seen=NOW)

    assert compute_priority(entry, NOW) == 0.0


def test_recency_is_clamped_at_five_days():
    old = ProgressEntry("old", correct_count=1, incorrect_count=0, last_seen=NOW - timedelta(days=5))
    ancient = ProgressEntry("ancient", correct_count=1, incorrect_count=0, last_seen=NOW - timedelta(days=400))

    assert compute_priority(old, NOW) == pytest.approx(0.3)
    assert compute_priority(ancient, NOW) == pytest.approx(0.3)


def test_future_last_seen_counts_as_fresh():
    entry = ProgressEntry("w", correct_count=1, incorrect_count=0, last_seen=NOW + timedelta(days=1))

    assert compute_priority(entry, NOW) == 0.0


def test_zero_attempts_has_zero_error_rate():
    entry = ProgressEntry("w", correct_count=0, incorrect_count=0, last_seen=NOW)

    assert compute_priority(entry, NOW) == 0.0


def test_missing_last_seen_counts_as_now():
    entry = ProgressEntry("w", correct_count=1, incorrect_count=1, last_seen=None)

    assert compute_priority(entry, NOW) == pytest.approx(0.35)


def test_naive_timestamps_are_treated_as_utc():
    entry = ProgressEntry(
        "w", correct_count=1, incorrect_count=0, last_seen=(NOW - timedelta(days=1)).replace(tzinfo=None)
    )

    assert compute_priority(entry, NOW) == pytest.approx(0.3 / 5)


@pytest.mark.parametrize("count,limit", [(3, 10), (15, None), (15, 4), (20, 20)])
def test_length_is_min_of_limit_and_input(count, limit):
    schedule = schedule_words(_entries(count), limit=limit, now=NOW)

    expected_limit = DEFAULT_LIMIT if limit is None else limit
    assert len(schedule) == min(expected_limit, count)


def test_default_limit_is_ten():
    assert len(schedule_words(_entries(25), now=NOW)) == 10


@pytest.mark.parametrize("limit", [0, -3])
def test_non_positive_limit_returns_empty(limit):
    assert schedule_words(_entries(5), limit=limit, now=NOW) == []


def test_empty_input_returns_empty():
    assert schedule_words([], now=NOW) == []


def test_output_is_sorted_and_bounded():
    schedule = schedule_words(_entries(20), limit=20, now=NOW)
    priorities = [item.priority for item in schedule]

    assert priorities == sorted(priorities, reverse=True)
    assert all(0.0 <= priority <= 1.0 for priority in priorities)


def test_ties_are_broken_by_word_id():
    entries = [
        ProgressEntry(word_id, correct_count=1, incorrect_count=1, last_seen=NOW)
        for word_id in ("c", "a", "b")
    ]

    schedule = schedule_words(entries, now=NOW)

    assert [item.word_id for item in schedule] == ["a", "b", "c"]


def test_same_input_and_clock_give_same_output():
    entries = _entries(12)

    first = schedule_words(entries, limit=8, now=NOW)
    second = schedule_words(list(reversed(entries)), limit=8, now=NOW)

    assert first == second

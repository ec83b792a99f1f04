"""API endpoint modules."""

from app.api.v1.endpoints import (
    analytics,
    media,
    players,
    progress,
    sample_words,
    sessions,
    words,
)

__all__ = [
    "analytics",
    "media",
    "players",
    "progress",
    "sample_words",
    "sessions",
    "words",
]

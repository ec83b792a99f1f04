"""Database models package."""
from app.db.models.analytics import AnalyticsEvent
from app.db.models.player import Player
from app.db.models.progress import WordProgress
from app.db.models.session import PracticeSession
from app.db.models.word import Word

__all__ = [
    "AnalyticsEvent",
    "Player",
    "PracticeSession",
    "Word",
    "WordProgress",
]

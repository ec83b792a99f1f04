"""Service layer package."""

from app.services.analytics import AnalyticsService
from app.services.media import MediaService
from app.services.players import PlayerService
from app.services.progress import ProgressService
from app.services.sample_words import SampleWordStore
from app.services.sessions import SessionService
from app.services.words import WordService

__all__ = [
    "AnalyticsService",
    "MediaService",
    "PlayerService",
    "ProgressService",
    "SampleWordStore",
    "SessionService",
    "WordService",
]

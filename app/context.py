"""Per-application resources owned by a single FastAPI instance."""
from __future__ import annotations

from dataclasses import dataclass

from loguru import logger
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from app.config import Settings
from app.db.session import build_engine, build_session_factory
from app.utils.cache import CacheBackend


@dataclass
class AppContext:
    """Settings plus the engine, session factory and cache built from them."""

    settings: Settings
    engine: Engine
    session_factory: sessionmaker
    cache: CacheBackend

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContext":
        engine = build_engine(settings)
        return cls(
            settings=settings,
            engine=engine,
            session_factory=build_session_factory(engine),
            cache=CacheBackend(settings.REDIS_URL),
        )

    def close(self) -> None:
        """Release pooled connections and local cache entries."""

        self.cache.clear()
        self.engine.dispose()
        logger.info("Application context closed")

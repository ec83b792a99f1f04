"""Shared API dependencies."""
from __future__ import annotations

from collections.abc import Generator

from fastapi import Depends, Header, Request
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import Settings
from app.context import AppContext
from app.core.security import verify_parent_secret
from app.services.media import MediaService
from app.services.sample_words import SampleWordStore
from app.utils.cache import CacheBackend


def get_context(request: Request) -> AppContext:
    """Return the context attached to the running application."""

    return request.app.state.context


def get_settings(context: AppContext = Depends(get_context)) -> Settings:
    return context.settings


def get_cache(context: AppContext = Depends(get_context)) -> CacheBackend:
    return context.cache


def get_db(context: AppContext = Depends(get_context)) -> Generator[Session, None, None]:
    """Yield a database session for the request lifetime."""

    db = context.session_factory()
    try:
        yield db
    except SQLAlchemyError as exc:
        logger.error("Database session error", error=str(exc))
        db.rollback()
        raise
    finally:
        db.close()


def require_parent(
    authorization: str | None = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> None:
    """Guard routes behind the optional parent secret."""

    verify_parent_secret(authorization, settings.PARENT_AUTH_SECRET)


def get_media_service(settings: Settings = Depends(get_settings)) -> MediaService:
    return MediaService(settings)


def get_sample_word_store(settings: Settings = Depends(get_settings)) -> SampleWordStore:
    return SampleWordStore(settings.SAMPLE_WORDS_PATH)

"""Vocabulary word endpoints."""
from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.api import deps
from app.config import Settings
from app.schemas import (
    WordBulkRequest,
    WordCreate,
    WordListResponse,
    WordRead,
    WordResponse,
)
from app.services.words import WordService
from app.utils.cache import CacheBackend, build_cache_key

router = APIRouter(prefix="/words", tags=["words"])

LIST_NAMESPACE = "words:list"
ITEM_NAMESPACE = "words:item"


def _invalidate(cache: CacheBackend) -> None:
    cache.invalidate(LIST_NAMESPACE)
    cache.invalidate(ITEM_NAMESPACE)


@router.get("", response_model=WordListResponse)
def list_words(
    week: int | None = Query(default=None, ge=0, description="Curriculum week to filter by"),
    db: Session = Depends(deps.get_db),
    cache: CacheBackend = Depends(deps.get_cache),
    settings: Settings = Depends(deps.get_settings),
) -> WordListResponse:
    """Return all words ordered alphabetically."""

    cache_key = build_cache_key(week=week)
    cached = cache.get(LIST_NAMESPACE, cache_key)
    if cached is not None:
        return cached

    words = WordService(db).list_words(week=week)
    response = WordListResponse(words=[WordRead.model_validate(word) for word in words])
    payload = response.model_dump(mode="json", by_alias=True)
    cache.set(LIST_NAMESPACE, cache_key, payload, ttl_seconds=settings.WORD_CACHE_TTL_SECONDS)
    return payload


@router.get("/{word_id}", response_model=WordResponse)
def get_word(
    word_id: uuid.UUID,
    db: Session = Depends(deps.get_db),
    cache: CacheBackend = Depends(deps.get_cache),
    settings: Settings = Depends(deps.get_settings),
) -> WordResponse:
    """Retrieve a word by identifier."""

    cache_key = build_cache_key(word_id=word_id)
    cached = cache.get(ITEM_NAMESPACE, cache_key)
    if cached is not None:
        return cached

    word = WordService(db).get_word(word_id)
    payload = WordResponse(word=WordRead.model_validate(word)).model_dump(mode="json", by_alias=True)
    cache.set(ITEM_NAMESPACE, cache_key, payload, ttl_seconds=settings.WORD_CACHE_TTL_SECONDS)
    return payload


@router.post("", response_model=WordResponse, status_code=status.HTTP_201_CREATED)
def create_word(
    payload: WordCreate,
    db: Session = Depends(deps.get_db),
    cache: CacheBackend = Depends(deps.get_cache),
) -> WordResponse:
    word = WordService(db).create_word(payload)
    _invalidate(cache)
    return WordResponse(word=WordRead.model_validate(word))


@router.post("/bulk", response_model=WordListResponse, status_code=status.HTTP_201_CREATED)
def upsert_words(
    payload: WordBulkRequest,
    db: Session = Depends(deps.get_db),
    cache: CacheBackend = Depends(deps.get_cache),
) -> WordListResponse:
    """Insert or overwrite many words at once, keyed by id."""

    words = WordService(db).upsert_words(payload.words)
    _invalidate(cache)
    return WordListResponse(words=[WordRead.model_validate(word) for word in words])


@router.delete("/{word_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_word(
    word_id: uuid.UUID,
    db: Session = Depends(deps.get_db),
    cache: CacheBackend = Depends(deps.get_cache),
) -> Response:
    WordService(db).delete_word(word_id)
    _invalidate(cache)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

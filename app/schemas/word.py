"""Pydantic schemas for vocabulary words."""
from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from pydantic import AnyUrl, Field

from app.schemas.base import CamelModel


class WordCreate(CamelModel):
    """Payload for creating a single word."""

    id: Optional[uuid.UUID] = None
    text: str = Field(min_length=1, max_length=255)
    pos: str = Field(min_length=1, max_length=50)
    transcription: str = Field(min_length=1, max_length=255)
    example_sentence: Optional[str] = None
    level: int = Field(ge=0)
    image_url: Optional[AnyUrl] = None
    audio_url: Optional[AnyUrl] = None
    ai_generated: bool = False


class WordBulkItem(CamelModel):
    """Partial word accepted by the bulk upsert; gaps fall back to defaults."""

    id: Optional[uuid.UUID] = None
    text: Optional[str] = Field(default=None, max_length=255)
    pos: Optional[str] = Field(default=None, max_length=50)
    transcription: Optional[str] = Field(default=None, max_length=255)
    example_sentence: Optional[str] = None
    level: Optional[int] = Field(default=None, ge=0)
    image_url: Optional[AnyUrl] = None
    audio_url: Optional[AnyUrl] = None
    ai_generated: Optional[bool] = None


class WordBulkRequest(CamelModel):
    words: list[WordBulkItem]


class WordRead(CamelModel):
    """Representation of a stored word."""

    id: uuid.UUID
    text: str
    pos: str
    transcription: str
    example_sentence: Optional[str] = None
    level: int
    image_url: Optional[str] = None
    audio_url: Optional[str] = None
    ai_generated: bool
    created_at: datetime
    updated_at: datetime


class WordResponse(CamelModel):
    word: WordRead


class WordListResponse(CamelModel):
    words: list[WordRead]

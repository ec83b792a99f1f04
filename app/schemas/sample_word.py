"""Pydantic schemas for the sample words file."""
from __future__ import annotations

from typing import Optional

from pydantic import ConfigDict, Field

from app.schemas.base import CamelModel, PartialUpdate


class SampleWordCreate(CamelModel):
    text: str = Field(min_length=1)
    transcription: str = ""
    example_sentence: str = ""
    level: int = Field(ge=1)
    term: Optional[int] = Field(default=None, ge=1)
    week: Optional[int] = Field(default=None, ge=1)
    pos: str
    ai_generated: bool = False
    image_url: Optional[str] = None
    audio_url: Optional[str] = None


class SampleWordUpdate(PartialUpdate):
    text: Optional[str] = Field(default=None, min_length=1)
    transcription: Optional[str] = None
    example_sentence: Optional[str] = None
    level: Optional[int] = Field(default=None, ge=1)
    term: Optional[int] = Field(default=None, ge=1)
    week: Optional[int] = Field(default=None, ge=1)
    pos: Optional[str] = None
    ai_generated: Optional[bool] = None
    image_url: Optional[str] = None
    audio_url: Optional[str] = None


class SampleWord(CamelModel):
    """Word record as stored in the sample file."""

    id: str
    text: str
    transcription: str = ""
    example_sentence: Optional[str] = None
    pos: str = "noun"
    level: int = 0
    term: Optional[int] = None
    week: Optional[int] = None
    image_url: Optional[str] = None
    audio_url: Optional[str] = None
    ai_generated: bool = False
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    model_config = ConfigDict(extra="allow")


class SampleWordResponse(CamelModel):
    word: SampleWord


class SampleWordListResponse(CamelModel):
    words: list[SampleWord]

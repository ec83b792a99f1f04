"""Pydantic schemas for generated media placeholders."""
from __future__ import annotations

import uuid
from typing import Literal, Optional

from pydantic import Field

from app.schemas.base import CamelModel

MediaStatus = Literal["stubbed", "pending"]


class ImageRequest(CamelModel):
    prompt: str = Field(min_length=1)
    style: Optional[str] = None


class AudioRequest(CamelModel):
    prompt: str = Field(min_length=1)
    voice: Optional[str] = None


class GeneratedImage(CamelModel):
    id: uuid.UUID
    prompt: str
    style: Optional[str] = None
    url: str
    status: MediaStatus


class GeneratedAudio(CamelModel):
    id: uuid.UUID
    prompt: str
    voice: Optional[str] = None
    url: str
    status: MediaStatus


class ImageResponse(CamelModel):
    image: GeneratedImage


class AudioResponse(CamelModel):
    audio: GeneratedAudio

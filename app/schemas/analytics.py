"""Pydantic schemas for gameplay analytics events."""
from __future__ import annotations

import uuid
from datetime import datetime
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import Field

from app.schemas.base import CamelModel


class _EventBase(CamelModel):
    event_id: Optional[uuid.UUID] = None
    player_id: uuid.UUID
    game_id: str = Field(min_length=1, max_length=100)
    timestamp: str


class WordSeenEvent(_EventBase):
    type: Literal["word_seen"]
    word_id: uuid.UUID
    result: Literal["correct", "incorrect"]


class PlayedGameEvent(_EventBase):
    type: Literal["played_game"]
    time_spent_ms: float = Field(ge=0)
    score: Optional[float] = None


class ReplayAudioEvent(_EventBase):
    type: Literal["replay_audio"]
    word_id: uuid.UUID


AnalyticsEventUnion = Union[WordSeenEvent, PlayedGameEvent, ReplayAudioEvent]

AnalyticsEventCreate = Annotated[AnalyticsEventUnion, Field(discriminator="type")]


class AnalyticsEventRead(CamelModel):
    """Stored event row."""

    event_id: uuid.UUID
    player_id: uuid.UUID
    game_id: str
    type: str
    payload: dict[str, Any]
    created_at: datetime


class AnalyticsEventResponse(CamelModel):
    event: AnalyticsEventCreate


class AnalyticsEventListResponse(CamelModel):
    events: list[AnalyticsEventRead]

"""Pydantic models for player progress and scheduling."""
from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from pydantic import Field

from app.schemas.base import CamelModel

MAX_SCHEDULE_LIMIT = 20


class ProgressUpsert(CamelModel):
    """Absolute counters for a (player, word) pair."""

    id: Optional[uuid.UUID] = None
    player_id: uuid.UUID
    word_id: uuid.UUID
    correct_count: int = Field(default=0, ge=0)
    incorrect_count: int = Field(default=0, ge=0)
    last_seen: Optional[datetime] = None


class AttemptRequest(CamelModel):
    """A single answer given by a player during a game."""

    player_id: uuid.UUID
    word_id: uuid.UUID
    correct: bool
    seen_at: Optional[datetime] = None


class ProgressRead(CamelModel):
    id: uuid.UUID
    player_id: uuid.UUID
    word_id: uuid.UUID
    correct_count: int
    incorrect_count: int
    last_seen: Optional[datetime] = None


class ProgressResponse(CamelModel):
    progress: ProgressRead


class ProgressListResponse(CamelModel):
    progress: list[ProgressRead]


class ScheduleRequest(CamelModel):
    """Request for the next words a player should practice."""

    player_id: uuid.UUID
    limit: Optional[int] = Field(default=None, gt=0, le=MAX_SCHEDULE_LIMIT)


class ScheduleItemRead(CamelModel):
    word_id: uuid.UUID
    priority: float


class ScheduleResponse(CamelModel):
    schedule: list[ScheduleItemRead]

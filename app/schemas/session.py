"""Pydantic schemas for practice sessions."""
from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any, Optional

from pydantic import Field, field_validator

from app.schemas.base import CamelModel, PartialUpdate


class SessionCreate(CamelModel):
    """Payload sent when a mini-game starts."""

    id: Optional[uuid.UUID] = None
    player_id: uuid.UUID
    started_at: datetime
    ended_at: Optional[datetime] = None
    score: Optional[float] = None
    details: Optional[dict[str, Any]] = None


class SessionUpdate(PartialUpdate):
    """Fields a game may fill in once it finishes."""

    ended_at: Optional[datetime] = None
    score: Optional[float] = None
    details: Optional[dict[str, Any]] = None


class SessionRead(CamelModel):
    id: uuid.UUID
    player_id: uuid.UUID
    started_at: datetime
    ended_at: Optional[datetime] = None
    score: Optional[float] = None
    details: dict[str, Any] = Field(default_factory=dict)

    @field_validator("details", mode="before")
    @classmethod
    def default_details(cls, value: Any) -> Any:
        return {} if value is None else value


class SessionResponse(CamelModel):
    session: SessionRead

"""Pydantic schemas for player profiles."""
from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from pydantic import AnyUrl, Field, model_validator

from app.schemas.base import CamelModel, PartialUpdate


class PlayerCreate(CamelModel):
    """Payload for registering a child profile."""

    id: Optional[uuid.UUID] = None
    name: str = Field(min_length=1, max_length=255)
    parent_id: Optional[uuid.UUID] = None
    avatar_url: Optional[AnyUrl] = None


class PlayerUpdate(PartialUpdate):
    """Partial update of a player profile."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    avatar_url: Optional[AnyUrl] = None

    @model_validator(mode="after")
    def ensure_payload_not_empty(self) -> "PlayerUpdate":
        if not any(value is not None for value in self.model_dump().values()):
            raise ValueError("At least one field must be provided")
        return self


class PlayerRead(CamelModel):
    id: uuid.UUID
    name: str
    parent_id: uuid.UUID
    avatar_url: Optional[str] = None
    created_at: datetime


class PlayerResponse(CamelModel):
    player: PlayerRead


class PlayerListResponse(CamelModel):
    players: list[PlayerRead]

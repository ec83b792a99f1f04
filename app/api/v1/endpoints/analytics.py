"""Gameplay analytics endpoints."""
from __future__ import annotations

import uuid
from typing import Annotated

from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.orm import Session

from app.api import deps
from app.schemas import (
    AnalyticsEventListResponse,
    AnalyticsEventRead,
    AnalyticsEventResponse,
    AnalyticsEventUnion,
)
from app.services.analytics import AnalyticsService

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("", response_model=AnalyticsEventListResponse)
def list_events(
    player_id: uuid.UUID | None = Query(default=None, alias="playerId"),
    db: Session = Depends(deps.get_db),
) -> AnalyticsEventListResponse:
    """Return the most recent events, newest first."""

    events = AnalyticsService(db).list_events(player_id=player_id)
    return AnalyticsEventListResponse(
        events=[AnalyticsEventRead.model_validate(event) for event in events]
    )


@router.post("", response_model=AnalyticsEventResponse, status_code=status.HTTP_201_CREATED)
def record_event(
    payload: Annotated[AnalyticsEventUnion, Body(discriminator="type")],
    db: Session = Depends(deps.get_db),
) -> AnalyticsEventResponse:
    event = AnalyticsService(db).record_event(payload)
    return AnalyticsEventResponse(event=event)

"""Endpoints for player word progress and adaptive scheduling."""
from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api import deps
from app.schemas import (
    AttemptRequest,
    ProgressListResponse,
    ProgressRead,
    ProgressResponse,
    ProgressUpsert,
    ScheduleItemRead,
    ScheduleRequest,
    ScheduleResponse,
)
from app.services.progress import ProgressService

router = APIRouter(prefix="/progress", tags=["progress"])


@router.post("/schedule", response_model=ScheduleResponse)
def schedule_words(
    payload: ScheduleRequest,
    db: Session = Depends(deps.get_db),
) -> ScheduleResponse:
    """Return the words a player should practice next, highest priority first."""

    schedule = ProgressService(db).schedule(player_id=payload.player_id, limit=payload.limit)
    return ScheduleResponse(
        schedule=[
            ScheduleItemRead(word_id=item.word_id, priority=item.priority) for item in schedule
        ]
    )


@router.post("/attempts", response_model=ProgressResponse)
def record_attempt(
    payload: AttemptRequest,
    db: Session = Depends(deps.get_db),
) -> ProgressResponse:
    """Count a single correct or incorrect answer."""

    progress = ProgressService(db).record_attempt(
        player_id=payload.player_id,
        word_id=payload.word_id,
        correct=payload.correct,
        seen_at=payload.seen_at,
    )
    return ProgressResponse(progress=ProgressRead.model_validate(progress))


@router.patch("", response_model=ProgressResponse)
def upsert_progress(
    payload: ProgressUpsert,
    db: Session = Depends(deps.get_db),
) -> ProgressResponse:
    """Insert or merge the counters for a (player, word) pair."""

    progress = ProgressService(db).upsert(payload)
    return ProgressResponse(progress=ProgressRead.model_validate(progress))


@router.get("/{player_id}", response_model=ProgressListResponse)
def list_progress(player_id: uuid.UUID, db: Session = Depends(deps.get_db)) -> ProgressListResponse:
    rows = ProgressService(db).list_for_player(player_id)
    return ProgressListResponse(progress=[ProgressRead.model_validate(row) for row in rows])

"""Practice session endpoints."""
from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api import deps
from app.schemas import SessionCreate, SessionRead, SessionResponse, SessionUpdate
from app.services.sessions import SessionService

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.post("", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
def create_session(payload: SessionCreate, db: Session = Depends(deps.get_db)) -> SessionResponse:
    """Open a session when a game starts."""

    session = SessionService(db).create(payload)
    return SessionResponse(session=SessionRead.model_validate(session))


@router.patch("/{session_id}", response_model=SessionResponse)
def update_session(
    session_id: uuid.UUID,
    payload: SessionUpdate,
    db: Session = Depends(deps.get_db),
) -> SessionResponse:
    """Record the end time, score or details of a session."""

    session = SessionService(db).update(session_id, payload)
    return SessionResponse(session=SessionRead.model_validate(session))

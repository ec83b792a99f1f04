"""Service layer for practice sessions."""
from __future__ import annotations

import uuid

from loguru import logger
from sqlalchemy.orm import Session

from app.db.models.player import Player
from app.db.models.session import PracticeSession
from app.schemas.session import SessionCreate, SessionUpdate
from app.utils.exceptions import NotFoundError


class SessionService:
    """Record the start and end of mini-game sessions."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, payload: SessionCreate) -> PracticeSession:
        if self.db.get(Player, payload.player_id) is None:
            raise NotFoundError("Player not found", {"id": str(payload.player_id)})

        session = PracticeSession(
            id=payload.id or uuid.uuid4(),
            player_id=payload.player_id,
            started_at=payload.started_at,
            ended_at=payload.ended_at,
            score=payload.score,
            details=payload.details or {},
        )
        self.db.add(session)
        self.db.commit()
        self.db.refresh(session)
        logger.info("Session started", session_id=str(session.id), player_id=str(session.player_id))
        return session

    def update(self, session_id: uuid.UUID, payload: SessionUpdate) -> PracticeSession:
        """Apply the supplied fields; omitted fields are left untouched."""

        session = self.db.get(PracticeSession, session_id)
        if session is None:
            raise NotFoundError("Session not found", {"id": str(session_id)})

        for field, value in payload.model_dump(exclude_unset=True).items():
            setattr(session, field, value)
        self.db.commit()
        self.db.refresh(session)
        return session

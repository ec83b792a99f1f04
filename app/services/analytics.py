"""Analytics event recording."""
from __future__ import annotations

import uuid

from loguru import logger
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.db.models.analytics import AnalyticsEvent
from app.schemas.analytics import PlayedGameEvent, ReplayAudioEvent, WordSeenEvent

EVENT_LIST_LIMIT = 500

GameEvent = WordSeenEvent | PlayedGameEvent | ReplayAudioEvent


class AnalyticsService:
    """Persist and list raw gameplay events."""

    def __init__(self, db: Session):
        self.db = db

    def record_event(self, event: GameEvent) -> GameEvent:
        """Store ``event`` and return it with its ``event_id`` filled in."""

        if event.event_id is None:
            event = event.model_copy(update={"event_id": uuid.uuid4()})

        row = AnalyticsEvent(
            event_id=event.event_id,
            player_id=event.player_id,
            game_id=event.game_id,
            type=event.type,
            payload=event.model_dump(mode="json", by_alias=True),
        )
        self.db.add(row)
        self.db.commit()
        logger.info(
            "Analytics event recorded",
            event_type=event.type,
            player_id=str(event.player_id),
            game_id=event.game_id,
        )
        return event

    def list_events(self, *, player_id: uuid.UUID | None = None) -> list[AnalyticsEvent]:
        """Return the newest events, optionally for a single player."""

        stmt = select(AnalyticsEvent)
        if player_id is not None:
            stmt = stmt.where(AnalyticsEvent.player_id == player_id)
        stmt = stmt.order_by(AnalyticsEvent.created_at.desc()).limit(EVENT_LIST_LIMIT)
        return list(self.db.scalars(stmt))

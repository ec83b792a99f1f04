"""Analytics event model."""
import uuid

from sqlalchemy import Column, DateTime, String
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.types import JSON
from sqlalchemy.sql import func

from app.db.base import Base


class AnalyticsEvent(Base):
    """Raw gameplay event reported by the frontend."""

    __tablename__ = "analytics_events"

    event_id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    player_id = Column(UUID(as_uuid=True), nullable=False, index=True)
    game_id = Column(String(100), nullable=False)
    type = Column(String(50), nullable=False)
    payload = Column(JSONB().with_variant(JSON(), "sqlite"), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)

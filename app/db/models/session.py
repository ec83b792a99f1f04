"""Practice session database model."""
import uuid

from sqlalchemy import Column, DateTime, Float, ForeignKey
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import backref, relationship
from sqlalchemy.types import JSON

from app.db.base import Base, TimestampMixin


class PracticeSession(TimestampMixin, Base):
    """One sitting of a player with a mini-game."""

    __tablename__ = "sessions"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    player_id = Column(
        UUID(as_uuid=True), ForeignKey("players.id", ondelete="CASCADE"), nullable=False, index=True
    )
    started_at = Column(DateTime(timezone=True), nullable=False)
    ended_at = Column(DateTime(timezone=True))
    score = Column(Float)
    details = Column(JSONB().with_variant(JSON(), "sqlite"), default=dict)

    player = relationship("Player", backref=backref("sessions", cascade="all, delete-orphan"))

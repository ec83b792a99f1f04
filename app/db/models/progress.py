"""Per-player word progress model."""
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import backref, relationship

from app.db.base import Base, TimestampMixin


class WordProgress(TimestampMixin, Base):
    """Correct/incorrect attempt counters for one (player, word) pair."""

    __tablename__ = "progress"
    __table_args__ = (UniqueConstraint("player_id", "word_id", name="uq_progress_player_word"),)

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    player_id = Column(
        UUID(as_uuid=True), ForeignKey("players.id", ondelete="CASCADE"), nullable=False, index=True
    )
    word_id = Column(
        UUID(as_uuid=True), ForeignKey("words.id", ondelete="CASCADE"), nullable=False, index=True
    )
    correct_count = Column(Integer, nullable=False, default=0)
    incorrect_count = Column(Integer, nullable=False, default=0)
    last_seen = Column(DateTime(timezone=True))

    player = relationship(
        "Player", backref=backref("progress_entries", cascade="all, delete-orphan")
    )
    word = relationship(
        "Word", backref=backref("progress_entries", cascade="all, delete-orphan")
    )

    def record_attempt(self, correct: bool, *, seen_at: datetime | None = None) -> None:
        """Increment the matching counter and stamp ``last_seen``."""

        if correct:
            self.correct_count = (self.correct_count or 0) + 1
        else:
            self.incorrect_count = (self.incorrect_count or 0) + 1
        self.last_seen = seen_at or datetime.now(timezone.utc)

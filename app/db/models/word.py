"""Vocabulary word database model."""
import uuid

from sqlalchemy import Boolean, Column, SmallInteger, String, Text
from sqlalchemy.dialects.postgresql import UUID

from app.db.base import Base, TimestampMixin


class Word(TimestampMixin, Base):
    """A vocabulary item presented by the mini-games."""

    __tablename__ = "words"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    text = Column(String(255), nullable=False)
    pos = Column(String(50), nullable=False)
    transcription = Column(String(255), nullable=False)
    example_sentence = Column(Text)

    # Curriculum week the word belongs to
    level = Column(SmallInteger, nullable=False, default=0, index=True)

    image_url = Column(Text)
    audio_url = Column(Text)
    ai_generated = Column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<Word text={self.text!r} level={self.level!r}>"

"""Player database model."""
import uuid

from sqlalchemy import Column, String, Text
from sqlalchemy.dialects.postgresql import UUID

from app.db.base import Base, TimestampMixin


class Player(TimestampMixin, Base):
    """A child profile grouped under a parent account id."""

    __tablename__ = "players"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    parent_id = Column(UUID(as_uuid=True), nullable=False, default=uuid.uuid4, index=True)
    avatar_url = Column(Text)

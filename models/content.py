"""SQLAlchemy model for bookmarked content items."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Index, String, Text, Uuid

from database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ContentItem(Base):
    """A single bookmark owned by exactly one user."""

    __tablename__ = "contents"
    __table_args__ = (
        Index("ix_contents_user_created", "user_id", "created_at"),
        {"extend_existing": True},
    )

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    title = Column(String(255), nullable=False)
    kind = Column(String(32), nullable=False)
    locator = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

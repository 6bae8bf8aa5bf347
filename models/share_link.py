"""SQLAlchemy model for public collection share links."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, String, Uuid, text

from database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ShareLink(Base):
    """Public hash pointing at a user's whole collection.

    Disabled links stay in the table with ``active = false``; the partial
    unique index keeps at most one active row per user.
    """

    __tablename__ = "share_links"
    __table_args__ = (
        Index(
            "uq_share_links_active_owner",
            "user_id",
            unique=True,
            postgresql_where=text("active IS TRUE"),
            sqlite_where=text("active = 1"),
        ),
        {"extend_existing": True},
    )

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    hash = Column(String(64), nullable=False, unique=True, index=True)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    deactivated_at = Column(DateTime(timezone=True), nullable=True)

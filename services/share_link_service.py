"""Service layer for collection share links.

Each user has at most one active link. Enabling is idempotent, disabling
keeps the row as inactive history, and resolving only ever matches active
rows so a revoked hash looks exactly like one that never existed.
"""

import secrets
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.env import env_int
from core.logging import get_logger
from models.content import ContentItem
from models.share_link import ShareLink
from services import content_service, user_service
from services.errors import Conflict, ServiceError

logger = get_logger(__name__)

SHARE_HASH_LENGTH = env_int("SHARE_HASH_LENGTH", 18, minimum=10)
SHARE_CREATE_MAX_ATTEMPTS = env_int("SHARE_CREATE_MAX_ATTEMPTS", 5, minimum=1)


class ShareLinkError(ServiceError):
    """Raised when a unique share hash could not be allocated."""

    def __init__(self, message: str):
        super().__init__("share.create_failed", message, status_code=503)


@dataclass(frozen=True)
class SharedView:
    display_name: str
    items: List[ContentItem]


def _generate_hash(length: Optional[int] = None) -> str:
    """Generate a cryptographically secure random hash."""
    size = length or SHARE_HASH_LENGTH
    return secrets.token_urlsafe(size)[:size]


def _find_active_link(db: Session, owner_id: uuid.UUID) -> Optional[ShareLink]:
    return db.execute(
        select(ShareLink).where(ShareLink.user_id == owner_id, ShareLink.active.is_(True))
    ).scalar_one_or_none()


def _insert_active_link(db: Session, owner_id: uuid.UUID) -> ShareLink:
    link = ShareLink(hash=_generate_hash(), user_id=owner_id, active=True)
    db.add(link)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise Conflict("share.conflict", "Share link insert violated a unique constraint.") from exc
    return link


def enable_share_link(db: Session, owner_id: uuid.UUID) -> str:
    """Return the owner's active hash, creating one if needed.

    Runs without locks: a concurrent enable that wins the partial unique
    index makes our insert fail, after which the winner's row is returned.
    A failure with no active row afterwards is a hash collision and is
    retried with a fresh hash.
    """
    existing = _find_active_link(db, owner_id)
    if existing is not None:
        return existing.hash

    for _attempt in range(SHARE_CREATE_MAX_ATTEMPTS):
        try:
            link = _insert_active_link(db, owner_id)
        except Conflict:
            existing = _find_active_link(db, owner_id)
            if existing is not None:
                logger.debug("Concurrent share enable for user=%s resolved to existing link.", owner_id)
                return existing.hash
            continue
        logger.info("Enabled share link for user=%s", owner_id)
        return link.hash
    raise ShareLinkError("Failed to create a unique share link. Please retry.")


def disable_share_link(db: Session, owner_id: uuid.UUID) -> bool:
    """Deactivate the owner's active link.

    Returns:
        True if a link was deactivated, False if there was no active link.
    """
    result = db.execute(
        update(ShareLink)
        .where(ShareLink.user_id == owner_id, ShareLink.active.is_(True))
        .values(active=False, deactivated_at=datetime.now(timezone.utc))
    )
    db.commit()
    if not result.rowcount:
        return False
    logger.info("Disabled share link for user=%s", owner_id)
    return True


def get_share_status(db: Session, owner_id: uuid.UUID) -> Optional[str]:
    link = _find_active_link(db, owner_id)
    return link.hash if link is not None else None


def resolve_share_link(db: Session, share_hash: str) -> Optional[SharedView]:
    """Materialize the public view behind an active hash.

    Returns:
        SharedView if the hash belongs to an active link, None otherwise.
    """
    if not share_hash:
        return None
    link = db.execute(
        select(ShareLink).where(ShareLink.hash == share_hash, ShareLink.active.is_(True))
    ).scalar_one_or_none()
    if link is None:
        return None

    owner = user_service.find_user_by_id(db, link.user_id)
    if owner is None:
        return None
    items = content_service.list_content(db, link.user_id, newest_first=True)
    return SharedView(display_name=owner.display_name, items=items)


__all__ = [
    "ShareLinkError",
    "SharedView",
    "disable_share_link",
    "enable_share_link",
    "get_share_status",
    "resolve_share_link",
]

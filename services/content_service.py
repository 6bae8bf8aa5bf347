"""Owner-scoped persistence for bookmarked content."""

from __future__ import annotations

import uuid
from typing import List

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from models.content import ContentItem
from services.errors import NotFoundOrForbidden


def create_content(
    db: Session,
    owner_id: uuid.UUID,
    *,
    title: str,
    kind: str,
    locator: str,
) -> ContentItem:
    """Persist a content item for ``owner_id``.

    ``kind`` is stored as given; callers validate it against the known kinds.
    """
    item = ContentItem(user_id=owner_id, title=title, kind=kind, locator=locator)
    db.add(item)
    db.commit()
    return item


def list_content(db: Session, owner_id: uuid.UUID, *, newest_first: bool = False) -> List[ContentItem]:
    """Return every item owned by ``owner_id``.

    The private listing is oldest first; the public share view asks for
    ``newest_first``. Ties on ``created_at`` are broken by id so the order is
    stable between calls.
    """
    stmt = select(ContentItem).where(ContentItem.user_id == owner_id)
    if newest_first:
        stmt = stmt.order_by(ContentItem.created_at.desc(), ContentItem.id.desc())
    else:
        stmt = stmt.order_by(ContentItem.created_at.asc(), ContentItem.id.asc())
    return list(db.execute(stmt).scalars().all())


def delete_content(db: Session, content_id: uuid.UUID, owner_id: uuid.UUID) -> None:
    """Delete an item only if ``owner_id`` owns it.

    Raises :class:`NotFoundOrForbidden` when the item does not exist or
    belongs to someone else; the two cases are deliberately indistinguishable.
    """
    result = db.execute(
        delete(ContentItem).where(ContentItem.id == content_id, ContentItem.user_id == owner_id)
    )
    db.commit()
    if not result.rowcount:
        raise NotFoundOrForbidden("content.not_found", "Content not found or access denied.")


__all__ = ["create_content", "delete_content", "list_content"]

"""Credential store: user rows keyed by normalized email."""

from __future__ import annotations

import uuid
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.logging import get_logger
from models.user import User
from services.auth.password import hash_password
from services.errors import DuplicateEmail, NotFound

logger = get_logger(__name__)


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def find_user_by_email(db: Session, email: str) -> Optional[User]:
    normalized = normalize_email(email)
    if not normalized:
        return None
    return db.execute(select(User).where(User.email == normalized)).scalar_one_or_none()


def find_user_by_id(db: Session, user_id: uuid.UUID) -> Optional[User]:
    return db.get(User, user_id)


def create_user(db: Session, *, email: str, password: str, display_name: str) -> uuid.UUID:
    """Hash the password and insert a new user.

    Raises :class:`DuplicateEmail` when the normalized email is already
    registered, including when a concurrent signup wins the unique index.
    """
    normalized = normalize_email(email)
    if find_user_by_email(db, normalized) is not None:
        raise DuplicateEmail()

    user = User(email=normalized, password_hash=hash_password(password), display_name=display_name.strip())
    db.add(user)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise DuplicateEmail() from exc
    logger.info("Registered user id=%s", user.id)
    return user.id


def update_display_name(db: Session, user_id: uuid.UUID, display_name: str) -> User:
    user = find_user_by_id(db, user_id)
    if user is None:
        raise NotFound("auth.user_not_found", "User not found.")
    user.display_name = display_name.strip()
    db.commit()
    return user


__all__ = [
    "create_user",
    "find_user_by_email",
    "find_user_by_id",
    "normalize_email",
    "update_display_name",
]

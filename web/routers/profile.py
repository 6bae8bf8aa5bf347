"""Profile endpoints for the signed-in user."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from database import get_db
from schemas.api.profile import ProfileResponse, ProfileUpdateRequest
from services import user_service
from services.errors import ServiceError
from web.deps import get_current_user_id, raise_http

router = APIRouter(prefix="/profile", tags=["Profile"])


def _to_response(user) -> ProfileResponse:
    return ProfileResponse(id=user.id, email=user.email, displayName=user.display_name)


@router.get("", response_model=ProfileResponse, summary="Read my profile")
def read_profile(
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> ProfileResponse:
    user = user_service.find_user_by_id(db, user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"code": "auth.user_not_found", "message": "User not found."},
        )
    return _to_response(user)


@router.patch("", response_model=ProfileResponse, summary="Change my display name")
def update_profile(
    payload: ProfileUpdateRequest,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> ProfileResponse:
    try:
        user = user_service.update_display_name(db, user_id, payload.displayName)
    except ServiceError as exc:
        raise_http(exc)
    return _to_response(user)


__all__ = ["router"]

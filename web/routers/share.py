"""API endpoints for collection share links."""

from __future__ import annotations

import uuid
from typing import Union

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from database import get_db
from schemas.api.content import ContentItemSchema
from schemas.api.share import (
    ShareDisabledResponse,
    ShareEnabledResponse,
    SharedCollectionResponse,
    ShareStatusResponse,
    ShareToggleRequest,
)
from services import share_link_service
from services.errors import ServiceError
from web.deps import get_current_user_id, raise_http

router = APIRouter(prefix="/share", tags=["Share"])


# Authenticated endpoints
@router.post(
    "",
    response_model=Union[ShareEnabledResponse, ShareDisabledResponse],
    summary="Enable or revoke the public collection link",
)
def toggle_share_link(
    payload: ShareToggleRequest,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    if payload.share:
        try:
            share_hash = share_link_service.enable_share_link(db, user_id)
        except ServiceError as exc:
            raise_http(exc)
        return ShareEnabledResponse(hash=share_hash)

    if not share_link_service.disable_share_link(db, user_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"code": "share.no_active_link", "message": "No link found to remove."},
        )
    return ShareDisabledResponse(message="Removed link")


@router.get("", response_model=ShareStatusResponse, summary="Current public link, if any")
def read_share_status(
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> ShareStatusResponse:
    return ShareStatusResponse(hash=share_link_service.get_share_status(db, user_id))


# Public endpoint (no authentication required)
@router.get("/{share_hash}", response_model=SharedCollectionResponse, summary="View a shared collection")
def read_shared_collection(share_hash: str, db: Session = Depends(get_db)) -> SharedCollectionResponse:
    view = share_link_service.resolve_share_link(db, share_hash)
    if view is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"code": "share.not_found", "message": "Share link not found."},
        )
    return SharedCollectionResponse(
        displayName=view.display_name,
        items=[ContentItemSchema.model_validate(item) for item in view.items],
    )


__all__ = ["router"]

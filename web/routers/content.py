"""Owner-scoped content endpoints."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_db
from schemas.api.content import (
    ContentCreateRequest,
    ContentDeleteResponse,
    ContentItemSchema,
    ContentListResponse,
)
from services import content_service
from services.errors import ServiceError
from web.deps import get_current_user_id, raise_http

router = APIRouter(prefix="/content", tags=["Content"])


@router.post(
    "",
    response_model=ContentItemSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Add a content item",
)
def create_content(
    payload: ContentCreateRequest,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> ContentItemSchema:
    item = content_service.create_content(
        db,
        user_id,
        title=payload.title,
        kind=payload.type,
        locator=payload.link,
    )
    return ContentItemSchema.model_validate(item)


@router.get("", response_model=ContentListResponse, summary="List my content")
def list_content(
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> ContentListResponse:
    items = content_service.list_content(db, user_id)
    return ContentListResponse(content=[ContentItemSchema.model_validate(item) for item in items])


@router.delete("/{content_id}", response_model=ContentDeleteResponse, summary="Delete one of my content items")
def delete_content(
    content_id: uuid.UUID,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> ContentDeleteResponse:
    try:
        content_service.delete_content(db, content_id, user_id)
    except ServiceError as exc:
        raise_http(exc)
    return ContentDeleteResponse(message="Content deleted", deletedId=content_id)


__all__ = ["router"]

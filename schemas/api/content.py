"""Pydantic schemas for content endpoints."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from core.auth.constants import ContentKind


class ContentCreateRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    type: ContentKind = Field(..., description="Content category.")
    link: str = Field(..., min_length=1, description="URL, or the note body for kind 'note'.")


class ContentItemSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: uuid.UUID
    title: str
    type: str = Field(validation_alias="kind")
    link: str = Field(validation_alias="locator")
    createdAt: datetime = Field(validation_alias="created_at")


class ContentListResponse(BaseModel):
    content: List[ContentItemSchema]


class ContentDeleteResponse(BaseModel):
    message: str
    deletedId: uuid.UUID

"""Pydantic schemas for collection share links."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from schemas.api.content import ContentItemSchema


class ShareToggleRequest(BaseModel):
    share: bool = Field(..., description="True to enable (or fetch) the link, False to revoke it.")


class ShareEnabledResponse(BaseModel):
    hash: str


class ShareDisabledResponse(BaseModel):
    message: str


class ShareStatusResponse(BaseModel):
    hash: Optional[str] = None


class SharedCollectionResponse(BaseModel):
    displayName: str
    items: List[ContentItemSchema]

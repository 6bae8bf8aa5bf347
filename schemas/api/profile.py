"""Pydantic schemas for the profile endpoints."""

from __future__ import annotations

import uuid

from pydantic import BaseModel

from schemas.api.auth import DisplayName


class ProfileResponse(BaseModel):
    id: uuid.UUID
    email: str
    displayName: str


class ProfileUpdateRequest(BaseModel):
    displayName: DisplayName

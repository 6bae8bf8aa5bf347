"""Pydantic schemas for the credential auth API."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, EmailStr, Field, StringConstraints

DisplayName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=120)]


class SignupRequest(BaseModel):
    email: EmailStr = Field(..., description="Signup email address; matched case-insensitively.")
    # Policy rules are checked by the service so every failure is reported together.
    password: str = Field(..., description="Plaintext password (Argon2 hashed before storage).")
    displayName: DisplayName = Field(..., description="Name shown on the public share page.")


class SigninRequest(BaseModel):
    email: EmailStr
    password: str


class SigninResponse(BaseModel):
    token: str

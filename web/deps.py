"""Shared FastAPI dependencies."""

from __future__ import annotations

import uuid
from typing import NoReturn, Optional

from fastapi import HTTPException, Request

from core.auth.constants import TOKEN_HEADER
from services.auth.gate import authenticate
from services.errors import Forbidden, ServiceError


def _extract_token(request: Request) -> Optional[str]:
    """Read the ``token`` header, falling back to ``Authorization: Bearer``."""
    token = request.headers.get(TOKEN_HEADER)
    if token and token.strip():
        return token.strip()
    header_value = (request.headers.get("authorization") or "").strip()
    if header_value.lower().startswith("bearer "):
        return header_value[7:].strip() or None
    return None


def raise_http(exc: ServiceError) -> NoReturn:
    raise HTTPException(status_code=exc.status_code, detail=exc.to_detail()) from exc


def get_current_user_id(request: Request) -> uuid.UUID:
    """Resolve the caller's user id or reject with 401 (no token) / 403 (bad token)."""
    try:
        subject = authenticate(_extract_token(request))
        try:
            return uuid.UUID(subject)
        except ValueError as exc:
            raise Forbidden("auth.token_format", "The token payload has an invalid format.") from exc
    except ServiceError as exc:
        raise_http(exc)


__all__ = ["get_current_user_id", "raise_http"]

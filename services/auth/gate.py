"""Request-boundary identity check."""

from __future__ import annotations

from typing import Optional

from services.auth_tokens import AuthTokenError, verify_token
from services.errors import Forbidden, Unauthenticated


def authenticate(token: Optional[str]) -> str:
    """Resolve a presented token to a user id.

    A missing token raises :class:`Unauthenticated`; a token that fails
    verification (bad signature, bad payload, expired) raises
    :class:`Forbidden` carrying the token error code.
    """
    value = (token or "").strip()
    if not value:
        raise Unauthenticated()
    try:
        return verify_token(value)
    except AuthTokenError as exc:
        raise Forbidden(exc.code, str(exc)) from exc


__all__ = ["authenticate"]

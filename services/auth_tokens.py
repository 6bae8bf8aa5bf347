"""Stateless bearer token issuance and verification."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from core.env import env_int, env_str
from core.env_utils import require_env_vars


class AuthTokenError(RuntimeError):
    """Raised when a bearer token cannot be trusted."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code


class TokenExpiredError(AuthTokenError):
    def __init__(self, message: str = "The token has expired."):
        super().__init__("auth.token_expired", message)


require_env_vars(["AUTH_JWT_SECRET", "AUTH_SECRET"], context="auth_tokens")

_JWT_SECRET: str = env_str("AUTH_JWT_SECRET", "", fallbacks=("AUTH_SECRET",))
_JWT_ALG: str = env_str("AUTH_JWT_ALG", "HS256")
# 0 keeps tokens perpetual (no exp claim).
_TOKEN_TTL = env_int("AUTH_TOKEN_TTL_SECONDS", 0, minimum=0)

USER_ID_CLAIM = "userId"


def issue_token(user_id: str, *, ttl_seconds: Optional[int] = None) -> str:
    """Sign a token whose only identity claim is ``userId``."""

    payload: Dict[str, Any] = {USER_ID_CLAIM: str(user_id)}
    ttl = _TOKEN_TTL if ttl_seconds is None else ttl_seconds
    if ttl:
        now = datetime.now(timezone.utc)
        payload["iat"] = int(now.timestamp())
        payload["exp"] = int((now + timedelta(seconds=ttl)).timestamp())
    return jwt.encode(payload, _JWT_SECRET, algorithm=_JWT_ALG)


def verify_token(token: str) -> str:
    """Validate the signature and payload shape, returning the user id."""

    try:
        payload = jwt.decode(token, _JWT_SECRET, algorithms=[_JWT_ALG])
    except jwt.ExpiredSignatureError as exc:
        raise TokenExpiredError() from exc
    except jwt.DecodeError as exc:
        # PyJWT reports a JSON payload that is not an object (e.g. a bare string) as a DecodeError.
        if _signature_matches(token):
            raise AuthTokenError("auth.token_format", "The token payload has an invalid format.") from exc
        raise AuthTokenError("auth.token_invalid", "The token could not be verified.") from exc
    except jwt.InvalidTokenError as exc:
        raise AuthTokenError("auth.token_invalid", "The token could not be verified.") from exc

    user_id = payload.get(USER_ID_CLAIM)
    if not isinstance(user_id, str) or not user_id:
        raise AuthTokenError("auth.token_format", "The token payload has an invalid format.")
    return user_id


def _signature_matches(token: str) -> bool:
    try:
        jwt.api_jws.decode_complete(token, _JWT_SECRET, algorithms=[_JWT_ALG])
    except jwt.InvalidTokenError:
        return False
    return True


__all__ = [
    "AuthTokenError",
    "TokenExpiredError",
    "USER_ID_CLAIM",
    "issue_token",
    "verify_token",
]

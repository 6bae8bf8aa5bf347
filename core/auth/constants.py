"""Centralized constants for authentication and content flows."""

from __future__ import annotations

from typing import Literal, Tuple

ContentKind = Literal["youtube", "twitter", "linkedin", "instagram", "notion", "excalidraw", "eraser", "note"]
PasswordRule = Literal[
    "password.too_short",
    "password.too_long",
    "password.missing_upper",
    "password.missing_lower",
    "password.missing_digit",
    "password.missing_symbol",
]

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 20
# Order in which policy failures are reported.
PASSWORD_RULES: Tuple[PasswordRule, ...] = (
    "password.too_short",
    "password.too_long",
    "password.missing_upper",
    "password.missing_lower",
    "password.missing_digit",
    "password.missing_symbol",
)

TOKEN_HEADER = "token"

__all__ = [
    "ContentKind",
    "PASSWORD_MAX_LENGTH",
    "PASSWORD_MIN_LENGTH",
    "PASSWORD_RULES",
    "PasswordRule",
    "TOKEN_HEADER",
]

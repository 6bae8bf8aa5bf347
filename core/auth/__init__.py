"""Auth-related shared utilities."""

from .constants import (
    ContentKind,
    PASSWORD_MAX_LENGTH,
    PASSWORD_MIN_LENGTH,
    PASSWORD_RULES,
    PasswordRule,
    TOKEN_HEADER,
)

__all__ = [
    "ContentKind",
    "PASSWORD_MAX_LENGTH",
    "PASSWORD_MIN_LENGTH",
    "PASSWORD_RULES",
    "PasswordRule",
    "TOKEN_HEADER",
]

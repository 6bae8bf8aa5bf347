"""Argon2 password hashing and the signup password policy."""

from __future__ import annotations

import re
from typing import Callable, Dict, List

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

from core.auth.constants import PASSWORD_MAX_LENGTH, PASSWORD_MIN_LENGTH, PASSWORD_RULES, PasswordRule
from core.env import env_int

_ARGON_TIME_COST = env_int("AUTH_ARGON2_TIME_COST", 3, minimum=1)
_ARGON_MEMORY_COST = env_int("AUTH_ARGON2_MEMORY_COST", 65536, minimum=8192)
_ARGON_PARALLELISM = env_int("AUTH_ARGON2_PARALLELISM", 1, minimum=1)

_PASSWORD_HASHER = PasswordHasher(
    time_cost=_ARGON_TIME_COST,
    memory_cost=_ARGON_MEMORY_COST,
    parallelism=_ARGON_PARALLELISM,
    hash_len=32,
    salt_len=16,
)

_UPPER_REGEX = re.compile(r"[A-Z]")
_LOWER_REGEX = re.compile(r"[a-z]")
_DIGIT_REGEX = re.compile(r"[0-9]")
_SYMBOL_REGEX = re.compile(r"[^A-Za-z0-9]")

_RULE_CHECKS: Dict[PasswordRule, Callable[[str], bool]] = {
    "password.too_short": lambda value: len(value) >= PASSWORD_MIN_LENGTH,
    "password.too_long": lambda value: len(value) <= PASSWORD_MAX_LENGTH,
    "password.missing_upper": lambda value: bool(_UPPER_REGEX.search(value)),
    "password.missing_lower": lambda value: bool(_LOWER_REGEX.search(value)),
    "password.missing_digit": lambda value: bool(_DIGIT_REGEX.search(value)),
    "password.missing_symbol": lambda value: bool(_SYMBOL_REGEX.search(value)),
}


def validate_password(password: str) -> List[PasswordRule]:
    """Return every policy rule the password breaks, in a fixed order.

    An empty list means the password is acceptable. The check never stops at
    the first failure so clients can show the whole list at once.
    """
    value = password or ""
    return [rule for rule in PASSWORD_RULES if not _RULE_CHECKS[rule](value)]


def hash_password(password: str) -> str:
    return _PASSWORD_HASHER.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    """Check a plaintext password against a stored hash.

    Mismatches and unreadable hashes both yield ``False``.
    """
    if not hashed:
        return False
    try:
        return _PASSWORD_HASHER.verify(hashed, password or "")
    except (VerificationError, InvalidHashError):
        return False


__all__ = ["hash_password", "validate_password", "verify_password"]

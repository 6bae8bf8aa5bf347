"""Auth service submodule exports."""

from __future__ import annotations

from .common import LoginResult, RegisterResult, login_user, register_user
from .gate import authenticate
from .password import hash_password, validate_password, verify_password

__all__ = [
    "LoginResult",
    "RegisterResult",
    "authenticate",
    "hash_password",
    "login_user",
    "register_user",
    "validate_password",
    "verify_password",
]

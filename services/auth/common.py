"""Email and password signup/signin flows."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any, Mapping

from sqlalchemy.orm import Session

from core.logging import get_logger
from services import user_service
from services.auth.password import validate_password, verify_password
from services.auth_tokens import issue_token
from services.errors import InvalidCredentials, NotFound, ValidationError

logger = get_logger(__name__)


@dataclass(frozen=True)
class RegisterResult:
    user_id: uuid.UUID


@dataclass(frozen=True)
class LoginResult:
    user_id: uuid.UUID
    token: str


class RegisterUserUseCase:
    """Signup: password policy, then the credential store."""

    def __init__(self, session: Session, payload: Mapping[str, Any]):
        self.session = session
        self.payload = payload
        self.email = user_service.normalize_email(payload.get("email") or "")
        self.password = payload.get("password") or ""
        self.display_name = (payload.get("displayName") or "").strip()

    def execute(self) -> RegisterResult:
        self._validate_payload()
        user_id = user_service.create_user(
            self.session,
            email=self.email,
            password=self.password,
            display_name=self.display_name,
        )
        return RegisterResult(user_id=user_id)

    def _validate_payload(self) -> None:
        if not self.email:
            raise ValidationError("auth.invalid_payload", "Email is required.", ["email.required"])
        failures = validate_password(self.password)
        if failures:
            raise ValidationError("auth.invalid_password", "Password does not meet the requirements.", failures)


class LoginUserUseCase:
    """Signin: look the user up, check the password, mint a token."""

    def __init__(self, session: Session, payload: Mapping[str, Any]):
        self.session = session
        self.payload = payload
        self.email = user_service.normalize_email(payload.get("email") or "")

    def execute(self) -> LoginResult:
        user = user_service.find_user_by_email(self.session, self.email)
        if user is None:
            raise NotFound("auth.user_not_found", "No account exists for this email.")
        if not verify_password(self.payload.get("password") or "", user.password_hash):
            logger.info("Rejected signin for user id=%s", user.id)
            raise InvalidCredentials()
        return LoginResult(user_id=user.id, token=issue_token(str(user.id)))


def register_user(session: Session, payload: Mapping[str, Any]) -> RegisterResult:
    return RegisterUserUseCase(session, payload).execute()


def login_user(session: Session, payload: Mapping[str, Any]) -> LoginResult:
    return LoginUserUseCase(session, payload).execute()


__all__ = [
    "LoginResult",
    "LoginUserUseCase",
    "RegisterResult",
    "RegisterUserUseCase",
    "login_user",
    "register_user",
]

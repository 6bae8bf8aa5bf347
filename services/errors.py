"""Error taxonomy shared by the auth, content and share-link services."""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence


class ServiceError(RuntimeError):
    """Base error carrying a stable code and the HTTP status the API maps it to."""

    status_code = 500

    def __init__(
        self,
        code: str,
        message: str,
        *,
        status_code: Optional[int] = None,
        extra: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.code = code
        if status_code is not None:
            self.status_code = status_code
        self.extra = dict(extra or {})

    def to_detail(self) -> Dict[str, Any]:
        detail: Dict[str, Any] = {"code": self.code, "message": str(self)}
        detail.update(self.extra)
        return detail


class ValidationError(ServiceError):
    """Input rejected; ``errors`` lists every rule that failed."""

    status_code = 400

    def __init__(self, code: str, message: str, errors: Sequence[str]):
        super().__init__(code, message, extra={"errors": list(errors)})
        self.errors = list(errors)


class DuplicateEmail(ServiceError):
    status_code = 409

    def __init__(self, message: str = "An account with this email already exists."):
        super().__init__("auth.email_taken", message)


class NotFound(ServiceError):
    status_code = 404


class NotFoundOrForbidden(NotFound):
    """Missing and foreign-owned records share one outcome so ownership cannot be inferred."""


class InvalidCredentials(ServiceError):
    status_code = 401

    def __init__(self, message: str = "Invalid credentials."):
        super().__init__("auth.invalid_credentials", message)


class Unauthenticated(ServiceError):
    status_code = 401

    def __init__(self, message: str = "A token is required for this request."):
        super().__init__("auth.required", message)


class Forbidden(ServiceError):
    status_code = 403


class Conflict(ServiceError):
    status_code = 409


__all__ = [
    "Conflict",
    "DuplicateEmail",
    "Forbidden",
    "InvalidCredentials",
    "NotFound",
    "NotFoundOrForbidden",
    "ServiceError",
    "Unauthenticated",
    "ValidationError",
]

# backend/roster/core/exceptions.py

from enum import Enum
from typing import Any, Optional


class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 400

    def __init__(self, message: str, errors: Optional[list[dict[str, Any]]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    status_code = 400


class AuthErrorKind(str, Enum):
    MISSING_TOKEN = "missing_token"
    INVALID_TOKEN = "invalid_token"
    INVALID_CREDENTIALS = "invalid_credentials"
    FORBIDDEN = "forbidden"


_AUTH_MESSAGES = {
    AuthErrorKind.MISSING_TOKEN: "Not authenticated",
    AuthErrorKind.INVALID_TOKEN: "Invalid token",
    AuthErrorKind.INVALID_CREDENTIALS: "Invalid email or password",
    AuthErrorKind.FORBIDDEN: "Admin role required",
}


class AuthError(DomainError):
    """Raised when identity is missing, unverifiable, or lacks permission."""

    def __init__(self, kind: AuthErrorKind, message: Optional[str] = None):
        super().__init__(message or _AUTH_MESSAGES[kind])
        self.kind = kind

    @property
    def status_code(self) -> int:  # type: ignore[override]
        return 403 if self.kind is AuthErrorKind.FORBIDDEN else 401


class NotFoundError(DomainError):
    status_code = 404


class ConflictError(DomainError):
    status_code = 409

"""
Exceptions that the API layer translates into HTTP responses.

Each exception carries the status code and a machine-readable error code, so
the handlers in `app.main` can render them without knowing the concrete type.
"""

from typing import Any


class AppException(Exception):
    """Base exception for errors that are reported to the client."""

    status_code: int = 500
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result: dict[str, Any] = {"detail": self.message, "code": self.code}
        if self.details:
            result["details"] = self.details
        return result


class ValidationError(AppException):
    """Malformed client input (bad email syntax, out-of-range field, ...)."""

    status_code = 400
    code = "VALIDATION_ERROR"


class NotFoundError(AppException):
    status_code = 404
    code = "NOT_FOUND"

    def __init__(self, entity: str, identifier: Any):
        super().__init__(f"{entity} not found: {identifier}", details={"entity": entity, "id": identifier})


class ConflictError(AppException):
    """The request collides with an existing row (duplicate username or email)."""

    status_code = 409
    code = "CONFLICT"


class AuthenticationError(AppException):
    status_code = 401
    code = "INVALID_CREDENTIALS"


class AccountLockedError(AppException):
    """Raised once a user has reached the maximum number of failed login attempts."""

    status_code = 423
    code = "ACCOUNT_LOCKED"

from .data import DataCorruptionError, EnumDecodingError
from .http import (
    AccountLockedError,
    AppException,
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)

__all__ = [
    "AccountLockedError",
    "AppException",
    "AuthenticationError",
    "ConflictError",
    "DataCorruptionError",
    "EnumDecodingError",
    "NotFoundError",
    "ValidationError",
]

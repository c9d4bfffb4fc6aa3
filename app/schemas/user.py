"""
Pydantic schemas defining the contract for user identity and authentication
across the Presentation (API) and Service Layers.
"""

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, EmailStr, Field

from app.models.definitions import (
    EMAIL_MAX_LENGTH,
    MAX_FAILED_LOGIN_ATTEMPTS,
    USERNAME_MAX_LENGTH,
    UserRole,
)

PASSWORD_MAX_BYTES = 72


def _check_email_length(value: str) -> str:
    if len(value) > EMAIL_MAX_LENGTH:
        raise ValueError(f"Email address must not exceed {EMAIL_MAX_LENGTH} characters.")
    return value


EmailAddress = Annotated[EmailStr, AfterValidator(_check_email_length)]


def _check_password_bytes(value: str) -> str:
    # bcrypt only accepts up to 72 bytes of input
    if len(value.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise ValueError(f"Password must not exceed {PASSWORD_MAX_BYTES} bytes when UTF-8 encoded.")
    return value


Password = Annotated[str, AfterValidator(_check_password_bytes)]


# --- Input Schemas (Requests / Commands) ---


class UserRequest(BaseModel):
    """
    Schema for user registration. The plaintext password is hashed by the
    Service Layer and never stored or echoed back.
    """

    username: str = Field(..., min_length=1, max_length=USERNAME_MAX_LENGTH, description="Unique login name")
    email_address: EmailAddress = Field(..., description="User's unique email address")
    password: Password = Field(..., min_length=8, description="User's password (max 72 UTF-8 bytes, hashed)")
    user_role: UserRole = Field(default=UserRole.USER, description="Role of the user")
    is_email_verified: bool = Field(default=False, description="Whether the email address is verified")


class UserUpdateRequest(BaseModel):
    """
    Schema for replacing a user's mutable profile fields.
    Updates are full-record replacements, so every field is required.
    """

    username: str = Field(..., min_length=1, max_length=USERNAME_MAX_LENGTH)
    email_address: EmailAddress
    user_role: UserRole
    is_email_verified: bool
    failed_login_attempts: int = Field(..., ge=0, le=MAX_FAILED_LOGIN_ATTEMPTS)
    last_login_date: datetime | None = None


class LoginRequest(BaseModel):
    """Credentials checked by POST /auth/login."""

    email_address: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., description="User's plain text password")


# --- Output Schemas (Responses) ---


class UserResponse(BaseModel):
    """
    Response schema for user information. The credential hash is deliberately absent.
    """

    model_config = {"from_attributes": True}

    id: int = Field(..., description="User ID")
    username: str
    email_address: str
    is_email_verified: bool
    user_role: UserRole
    failed_login_attempts: int

    created_at: datetime = Field(..., description="Date and time of user creation")
    updated_at: datetime | None = Field(default=None, description="Date and time of last update")
    last_login_date: datetime | None = Field(default=None, description="Date and time of last login")


class DashboardResponse(BaseModel):
    username: str

from datetime import datetime
from enum import Enum as PyEnum

from sqlalchemy import Boolean, CheckConstraint, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.types import EnumName

from .base import Base, TimestampMixin

USERNAME_MAX_LENGTH = 10
SECRET_KEY_MAX_LENGTH = 255
EMAIL_MAX_LENGTH = 100
ROLE_MAX_LENGTH = 20
MAX_FAILED_LOGIN_ATTEMPTS = 5


class UserRole(str, PyEnum):
    ADMIN = "Admin"
    USER = "User"


# --- CORE IDENTITY ENTITY ---


class User(Base, TimestampMixin):
    """
    The User Definition Table (Users).
    A registered user of the application; every user-owned Category points here.

    Both username and email address are unique. The email address is the
    identifier used by external lookups (dashboard, login).
    """

    __tablename__ = "Users"
    __table_args__ = (
        CheckConstraint(
            f"failed_login_attempts >= 0 AND failed_login_attempts <= {MAX_FAILED_LOGIN_ATTEMPTS}",
            name="ck_users_failed_login_attempts_range",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, comment="Unique User ID.")

    username: Mapped[str] = mapped_column(
        String(USERNAME_MAX_LENGTH), nullable=False, unique=True, comment="Unique login name."
    )

    hashed_secret_key: Mapped[str] = mapped_column(
        String(SECRET_KEY_MAX_LENGTH), nullable=False, comment="Secured hash of the user's password."
    )

    email_address: Mapped[str] = mapped_column(
        String(EMAIL_MAX_LENGTH),
        nullable=False,
        unique=True,
        index=True,
        comment="User's unique email address, used as the external lookup identifier.",
    )

    is_email_verified: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, comment="Set once the email verification flow completes."
    )

    user_role: Mapped[UserRole] = mapped_column(
        EnumName(UserRole, length=ROLE_MAX_LENGTH),
        nullable=False,
        default=UserRole.USER,
        comment="Role name (stored as text, never as an ordinal).",
    )

    last_login_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, comment="Date and time of the last successful login."
    )

    failed_login_attempts: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, comment="Consecutive failed logins, capped to deter brute force."
    )

    def __repr__(self) -> str:
        return f"<User id={self.id} username={self.username!r}>"

import logging
from collections.abc import Sequence

from app.core.security.password import check_password, hash_password
from app.exceptions.http import AccountLockedError, AuthenticationError, ConflictError, NotFoundError
from app.models.base import utcnow
from app.models.definitions import MAX_FAILED_LOGIN_ATTEMPTS, User
from app.repositories import UserRepositoryProtocol
from app.schemas import DashboardResponse, LoginRequest, UserRequest, UserResponse, UserUpdateRequest

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, user_repo: UserRepositoryProtocol):
        self._user_repo = user_repo

    # --- 1. USER REGISTRATION ---

    async def register_user(self, data: UserRequest) -> UserResponse:
        """
        Registers a new user with a hashed credential.
        Duplicate usernames and email addresses are rejected before the insert;
        a concurrent duplicate still fails on the unique constraint.
        """
        await self._ensure_unique(data.username, data.email_address)

        user = User(
            username=data.username,
            email_address=data.email_address,
            hashed_secret_key=hash_password(data.password),
            user_role=data.user_role,
            is_email_verified=data.is_email_verified,
            failed_login_attempts=0,
        )
        created_user = await self._user_repo.add(user)
        logger.info("Registered user id=%s", created_user.id)
        return UserResponse.model_validate(created_user)

    # --- 2. USER AUTHENTICATION ---

    async def authenticate(self, credentials: LoginRequest) -> UserResponse:
        """
        Authenticates a user by email and password.

        Each failure increments the user's failed-attempt counter up to the cap;
        once the cap is reached further attempts are refused until an
        administrator resets the counter. Success resets the counter and records
        the login time.
        """
        user = await self._user_repo.get_by_email(credentials.email_address)
        if not user:
            raise AuthenticationError("Invalid email address or password.")

        if user.failed_login_attempts >= MAX_FAILED_LOGIN_ATTEMPTS:
            logger.warning("Login refused for locked user id=%s", user.id)
            raise AccountLockedError("Too many failed login attempts.")

        if not check_password(credentials.password, user.hashed_secret_key):
            user.failed_login_attempts = min(user.failed_login_attempts + 1, MAX_FAILED_LOGIN_ATTEMPTS)
            await self._user_repo.update(user)
            logger.info("Failed login for user id=%s (%d)", user.id, user.failed_login_attempts)
            raise AuthenticationError("Invalid email address or password.")

        user.failed_login_attempts = 0
        user.last_login_date = utcnow()
        await self._user_repo.update(user)
        return UserResponse.model_validate(user)

    # --- 3. PROFILE MANAGEMENT ---

    async def get_user(self, user_id: int) -> UserResponse:
        user = await self._user_repo.get_by_id(user_id)
        if not user:
            raise NotFoundError("User", user_id)
        return UserResponse.model_validate(user)

    async def list_users(self) -> list[UserResponse]:
        users: Sequence[User] = await self._user_repo.get_all()
        return [UserResponse.model_validate(user) for user in users]

    async def update_user(self, user_id: int, data: UserUpdateRequest) -> UserResponse:
        """
        Replaces the user's mutable profile fields. The credential hash and the
        creation timestamp are kept.
        """
        user = await self._user_repo.get_by_id(user_id)
        if not user:
            raise NotFoundError("User", user_id)

        await self._ensure_unique(data.username, data.email_address, current_id=user_id)

        replacement = User(
            id=user.id,
            username=data.username,
            email_address=data.email_address,
            hashed_secret_key=user.hashed_secret_key,
            user_role=data.user_role,
            is_email_verified=data.is_email_verified,
            failed_login_attempts=data.failed_login_attempts,
            last_login_date=data.last_login_date,
            created_at=user.created_at,
        )
        updated_user = await self._user_repo.update(replacement)
        if not updated_user:
            # Removed between the lookup and the update
            raise NotFoundError("User", user_id)
        return UserResponse.model_validate(updated_user)

    async def delete_user(self, user_id: int) -> None:
        if await self._user_repo.delete(user_id):
            logger.info("Deleted user id=%s", user_id)

    # --- 4. DASHBOARD ---

    async def get_dashboard(self, email: str) -> DashboardResponse:
        user = await self._user_repo.get_by_email(email)
        if not user:
            raise NotFoundError("User", email)
        return DashboardResponse(username=user.username)

    async def _ensure_unique(self, username: str, email: str, current_id: int | None = None) -> None:
        by_username = await self._user_repo.get_by_username(username)
        if by_username and by_username.id != current_id:
            raise ConflictError("Username is already taken.", details={"field": "username"})

        by_email = await self._user_repo.get_by_email(email)
        if by_email and by_email.id != current_id:
            raise ConflictError("User with this email already exists.", details={"field": "email_address"})

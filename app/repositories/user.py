import logging
from collections.abc import Sequence

from sqlalchemy import select

from app.db.utils import apply_dict_updates, column_values
from app.models.base import utcnow
from app.models.definitions import User

from .base import SessionRepository

logger = logging.getLogger(__name__)


class UserRepository(SessionRepository):
    """
    Data access for the Users table.
    Every write commits immediately; lookups return None instead of raising.
    """

    # Never copied from the caller's entity on update
    _IMMUTABLE_FIELDS = {"id", "created_at"}

    async def get_by_id(self, user_id: int) -> User | None:
        """Retrieves a User by their primary ID."""
        return await self.session.get(User, user_id)

    async def get_by_username(self, username: str) -> User | None:
        """
        Retrieves the first User with the given username.
        Case sensitivity follows the database collation.
        """
        stmt = select(User).where(User.username == username).order_by(User.id).limit(1)
        return (await self.session.scalars(stmt)).first()

    async def get_by_email(self, email: str) -> User | None:
        """Retrieves the first User with the given email address."""
        stmt = select(User).where(User.email_address == email).order_by(User.id).limit(1)
        return (await self.session.scalars(stmt)).first()

    async def get_all(self) -> Sequence[User]:
        """Retrieves every User. Administrative use only, there is no pagination."""
        stmt = select(User).order_by(User.id)
        return (await self.session.scalars(stmt)).all()

    async def add(self, user: User) -> User:
        """
        Inserts a new User and commits.

        Raises:
            IntegrityError: If the username or email address is already taken.
        """
        self.session.add(user)
        await self._commit()
        logger.debug("Created user id=%s", user.id)
        return user

    async def update(self, user: User) -> User | None:
        """
        Replaces every mutable field of the stored User with the values of `user`
        and stamps `updated_at`.

        Returns None without writing anything when no row has `user.id`.
        """
        stored = await self.get_by_id(user.id)
        if not stored:
            logger.debug("Update skipped, user id=%s does not exist", user.id)
            return None

        if stored is not user:
            apply_dict_updates(stored, column_values(user), self._IMMUTABLE_FIELDS)
        stored.updated_at = utcnow()

        await self._commit()
        logger.debug("Updated user id=%s", stored.id)
        return stored

    async def delete(self, user_id: int) -> bool:
        """Deletes the User if it exists. Returns whether a row was removed."""
        user = await self.get_by_id(user_id)
        if not user:
            return False
        await self.session.delete(user)
        await self._commit()
        logger.debug("Deleted user id=%s", user_id)
        return True

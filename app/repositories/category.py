import logging
from collections.abc import Sequence

from sqlalchemy import or_, select

from app.db.utils import apply_dict_updates, column_values
from app.models.category import Category

from .base import SessionRepository

logger = logging.getLogger(__name__)


class CategoryRepository(SessionRepository):
    """
    Data access for the Categories table, covering both system-wide default
    categories and user-owned ones.
    """

    async def get_by_id(self, category_id: int) -> Category | None:
        """Retrieves a Category by ID."""
        return await self.session.get(Category, category_id)

    async def get_all(self) -> Sequence[Category]:
        stmt = select(Category).order_by(Category.id)
        return (await self.session.scalars(stmt)).all()

    async def get_user_categories(self, user_id: int) -> Sequence[Category]:
        """
        Retrieves the categories visible to a user: the ones the user owns plus
        every default category.

        Runs as one filtered query, so a category that is both owned by the user
        and flagged as default is returned once.
        """
        stmt = (
            select(Category)
            .where(or_(Category.user_id == user_id, Category.is_default.is_(True)))
            .order_by(Category.id)
        )
        return (await self.session.scalars(stmt)).all()

    async def add(self, category: Category) -> Category:
        self.session.add(category)
        await self._commit()
        logger.debug("Created category id=%s", category.id)
        return category

    async def update(self, category: Category) -> Category | None:
        """
        Replaces name, owner and default flag of the stored Category.
        Returns None when no row has `category.id`.
        """
        stored = await self.get_by_id(category.id)
        if not stored:
            logger.debug("Update skipped, category id=%s does not exist", category.id)
            return None

        if stored is not category:
            apply_dict_updates(stored, column_values(category), {"id"})

        await self._commit()
        return stored

    async def delete(self, category_id: int) -> bool:
        category = await self.get_by_id(category_id)
        if not category:
            return False
        await self.session.delete(category)
        await self._commit()
        logger.debug("Deleted category id=%s", category_id)
        return True

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from .category import Category

logger = logging.getLogger(__name__)

# --- STATIC DATA DEFINITIONS ---

# System-wide categories every user sees. They are owned by nobody (user_id NULL).
DEFAULT_CATEGORIES: list[str] = [
    "Food",
    "Rent",
    "Utilities",
    "Transportation",
    "Entertainment",
    "Health",
    "Savings",
    "Other",
]

# --- SEEDING FUNCTIONS ---


async def seed_default_categories(session: AsyncSession) -> list[Category]:
    """
    Inserts the default categories that are not present yet.
    Safe to run on every startup; existing rows are left untouched.

    Returns the categories that were created.
    """
    stmt = select(Category.name).where(Category.is_default.is_(True), Category.user_id.is_(None))
    existing = set((await session.scalars(stmt)).all())

    created: list[Category] = []
    for name in DEFAULT_CATEGORIES:
        if name in existing:
            logger.debug("Default category %r already exists", name)
            continue
        category = Category(name=name, user_id=None, is_default=True)
        session.add(category)
        created.append(category)

    if not created:
        return created

    try:
        await session.commit()
    except IntegrityError:
        await session.rollback()
        logger.error("Seeding default categories failed, transaction rolled back")
        raise

    logger.info("Seeded %d default categories", len(created))
    return created

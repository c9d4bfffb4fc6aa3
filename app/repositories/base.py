import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


class SessionRepository:
    """Shared plumbing for repositories bound to one request-scoped AsyncSession."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _commit(self) -> None:
        """
        Commits the pending unit of work.

        On failure the session is rolled back so it stays usable, and the
        original error (e.g. IntegrityError) is re-raised to the caller.
        """
        try:
            await self.session.commit()
        except SQLAlchemyError:
            logger.debug("Commit failed, rolling back session", exc_info=True)
            await self.session.rollback()
            raise

"""
Persistence context: engine, session factory and the request-scoped session.

One AsyncSession is opened per request and closed when the request ends. The
connection pool is owned by the engine, which lives for the whole process and
is disposed on shutdown.
"""

import logging
from collections.abc import AsyncIterator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from app.config import Settings
from app.models import Base

logger = logging.getLogger(__name__)


def build_engine(settings: Settings) -> AsyncEngine:
    """Creates the process-wide async engine (and its connection pool)."""
    logger.info("Creating database engine for %s", settings.database_url)
    return create_async_engine(settings.database_url, echo=settings.DEBUG, pool_pre_ping=True)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Entities stay readable after commit; nothing is cached across sessions
    return async_sessionmaker(engine, expire_on_commit=False)


async def init_models(engine: AsyncEngine) -> None:
    """Creates the Users and Categories tables if they do not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema is ready")


async def get_session(request: Request) -> AsyncIterator[AsyncSession]:
    """
    FastAPI dependency yielding a request-scoped session.

    The factory is stored on `app.state` by the application lifespan.
    """
    session_factory: async_sessionmaker[AsyncSession] = request.app.state.session_factory
    async with session_factory() as session:
        yield session

# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Provides fixtures for all tests:
# - Required environment variables set before any app import
# - An in-memory SQLite database (aiosqlite) with the schema created
# - Factories for User and Category entities
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================

os.environ.setdefault("ALLOWED_ORIGIN", "http://localhost:3000")
os.environ.setdefault("DB_SERVER", "localhost")
os.environ.setdefault("DB_NAME", "moneytale_test")
os.environ.setdefault("DB_USER", "moneytale")
os.environ.setdefault("DB_PASSWORD", "test-password")
os.environ.setdefault("ENVIRONMENT", "development")

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from app.db.session import build_session_factory, init_models
from app.models import Category, User, UserRole


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest.fixture
async def engine():
    """Fresh in-memory database per test; StaticPool keeps the single connection alive."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


# =============================================================================
# Entity Factories
# =============================================================================

@pytest.fixture
def make_user():
    """Builds a transient User; override any column with keyword arguments."""
    def _make_user(**overrides) -> User:
        values = {
            "username": "alice",
            "email_address": "alice@moneytale.io",
            "hashed_secret_key": "$2b$12$notarealhashnotarealhashnotarealhashnotarealhashnot",
            "is_email_verified": False,
            "user_role": UserRole.USER,
            "failed_login_attempts": 0,
        }
        values.update(overrides)
        return User(**values)

    return _make_user


@pytest.fixture
def make_category():
    def _make_category(**overrides) -> Category:
        values = {"name": "Food", "user_id": None, "is_default": False}
        values.update(overrides)
        return Category(**values)

    return _make_category

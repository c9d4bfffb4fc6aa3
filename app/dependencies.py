# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for the persistence context, repositories and
# services. Handlers receive these through Depends(); tests replace the
# repository providers with in-memory fakes via `app.dependency_overrides`.
# =============================================================================

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_session
from app.repositories import (
    CategoryRepository,
    CategoryRepositoryProtocol,
    UserRepository,
    UserRepositoryProtocol,
)
from app.services import CategoryService, UserService

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_user_repository(session: SessionDep) -> UserRepositoryProtocol:
    return UserRepository(session)


def get_category_repository(session: SessionDep) -> CategoryRepositoryProtocol:
    return CategoryRepository(session)


UserRepositoryDep = Annotated[UserRepositoryProtocol, Depends(get_user_repository)]
CategoryRepositoryDep = Annotated[CategoryRepositoryProtocol, Depends(get_category_repository)]


def get_user_service(user_repo: UserRepositoryDep) -> UserService:
    return UserService(user_repo)


def get_category_service(category_repo: CategoryRepositoryDep, user_repo: UserRepositoryDep) -> CategoryService:
    return CategoryService(category_repo, user_repo)


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
CategoryServiceDep = Annotated[CategoryService, Depends(get_category_service)]

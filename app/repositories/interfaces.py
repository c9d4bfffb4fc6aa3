"""
Capability sets of the repositories.

API handlers and services depend on these protocols, not on the SQLAlchemy
implementations, so tests can substitute in-memory fakes.
"""

from collections.abc import Sequence
from typing import Protocol

from app.models import Category, User


class UserRepositoryProtocol(Protocol):
    async def get_by_id(self, user_id: int) -> User | None: ...

    async def get_by_username(self, username: str) -> User | None: ...

    async def get_by_email(self, email: str) -> User | None: ...

    async def get_all(self) -> Sequence[User]: ...

    async def add(self, user: User) -> User: ...

    async def update(self, user: User) -> User | None: ...

    async def delete(self, user_id: int) -> bool: ...


class CategoryRepositoryProtocol(Protocol):
    async def get_by_id(self, category_id: int) -> Category | None: ...

    async def get_all(self) -> Sequence[Category]: ...

    async def get_user_categories(self, user_id: int) -> Sequence[Category]: ...

    async def add(self, category: Category) -> Category: ...

    async def update(self, category: Category) -> Category | None: ...

    async def delete(self, category_id: int) -> bool: ...

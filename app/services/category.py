import logging

from app.exceptions.http import NotFoundError
from app.models.category import Category
from app.repositories import CategoryRepositoryProtocol, UserRepositoryProtocol
from app.schemas import CategoryRequest, CategoryResponse

logger = logging.getLogger(__name__)


class CategoryService:
    def __init__(self, category_repo: CategoryRepositoryProtocol, user_repo: UserRepositoryProtocol):
        self._category_repo = category_repo
        self._user_repo = user_repo

    async def get_category(self, category_id: int) -> CategoryResponse:
        category = await self._category_repo.get_by_id(category_id)
        if not category:
            raise NotFoundError("Category", category_id)
        return CategoryResponse.model_validate(category)

    async def list_categories(self) -> list[CategoryResponse]:
        return [CategoryResponse.model_validate(c) for c in await self._category_repo.get_all()]

    async def list_user_categories(self, user_id: int) -> list[CategoryResponse]:
        """Categories owned by the user plus every default category."""
        await self._ensure_user_exists(user_id)
        categories = await self._category_repo.get_user_categories(user_id)
        return [CategoryResponse.model_validate(c) for c in categories]

    async def create_category(self, data: CategoryRequest) -> CategoryResponse:
        if data.user_id is not None:
            await self._ensure_user_exists(data.user_id)

        category = await self._category_repo.add(Category(**data.model_dump()))
        logger.info("Created category id=%s for user_id=%s", category.id, category.user_id)
        return CategoryResponse.model_validate(category)

    async def update_category(self, category_id: int, data: CategoryRequest) -> CategoryResponse:
        if data.user_id is not None:
            await self._ensure_user_exists(data.user_id)

        updated = await self._category_repo.update(Category(id=category_id, **data.model_dump()))
        if not updated:
            raise NotFoundError("Category", category_id)
        return CategoryResponse.model_validate(updated)

    async def delete_category(self, category_id: int) -> None:
        if await self._category_repo.delete(category_id):
            logger.info("Deleted category id=%s", category_id)

    async def _ensure_user_exists(self, user_id: int) -> None:
        if not await self._user_repo.get_by_id(user_id):
            raise NotFoundError("User", user_id)

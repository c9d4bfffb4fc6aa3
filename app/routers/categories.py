# =============================================================================
# app/routers/categories.py - Category Endpoints
# =============================================================================

from fastapi import APIRouter, Response, status

from app.dependencies import CategoryServiceDep
from app.schemas import CategoryRequest, CategoryResponse

router = APIRouter()


@router.get("", response_model=list[CategoryResponse])
async def list_categories(category_service: CategoryServiceDep):
    return await category_service.list_categories()


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(data: CategoryRequest, category_service: CategoryServiceDep):
    return await category_service.create_category(data)


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(category_id: int, category_service: CategoryServiceDep):
    return await category_service.get_category(category_id)


@router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(category_id: int, data: CategoryRequest, category_service: CategoryServiceDep):
    return await category_service.update_category(category_id, data)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(category_id: int, category_service: CategoryServiceDep):
    await category_service.delete_category(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

# =============================================================================
# app/routers/users.py - User Endpoints
# =============================================================================

from fastapi import APIRouter, Response, status

from app.dependencies import CategoryServiceDep, UserServiceDep
from app.schemas import CategoryResponse, UserRequest, UserResponse, UserUpdateRequest

router = APIRouter()


@router.get("", response_model=list[UserResponse])
async def list_users(user_service: UserServiceDep):
    return await user_service.list_users()


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register_user(data: UserRequest, user_service: UserServiceDep):
    """Registers a user. 409 when the username or email address is taken."""
    return await user_service.register_user(data)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, user_service: UserServiceDep):
    return await user_service.get_user(user_id)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(user_id: int, data: UserUpdateRequest, user_service: UserServiceDep):
    """Replaces all mutable profile fields of the user."""
    return await user_service.update_user(user_id, data)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: int, user_service: UserServiceDep):
    """Deletes the user if present. Deleting a missing user is not an error."""
    await user_service.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{user_id}/categories", response_model=list[CategoryResponse])
async def list_user_categories(user_id: int, category_service: CategoryServiceDep):
    """Categories owned by the user plus all default categories."""
    return await category_service.list_user_categories(user_id)

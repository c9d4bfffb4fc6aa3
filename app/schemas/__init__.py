from .category import CategoryRequest, CategoryResponse
from .user import DashboardResponse, LoginRequest, UserRequest, UserResponse, UserUpdateRequest

__all__ = [
    "CategoryRequest",
    "CategoryResponse",
    "DashboardResponse",
    "LoginRequest",
    "UserRequest",
    "UserResponse",
    "UserUpdateRequest",
]

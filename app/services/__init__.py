from .category import CategoryService
from .user import UserService

__all__ = ["CategoryService", "UserService"]

from .base import Base
from .category import Category
from .definitions import User, UserRole

__all__ = ["Base", "Category", "User", "UserRole"]

from .category import CategoryRepository
from .interfaces import CategoryRepositoryProtocol, UserRepositoryProtocol
from .user import UserRepository

__all__ = ["CategoryRepository", "CategoryRepositoryProtocol", "UserRepository", "UserRepositoryProtocol"]

# 📄 File: devconnect/modules/user_management/domain/repositories/user_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for how to save, find and remove developer accounts
# 🧪 Purpose (Technical Summary):
# Repository interface defining data access operations for User entities following the Repository pattern
# 🔗 Dependencies:
# Domain models (User), typing, abc
# 🔄 Connected Modules / Calls From:
# auth_service.py, profile_service.py, account_service.py, post_service.py, user_repository_impl.py

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.user import User


class UserRepository(ABC):
    """
    Repository interface for User entity data access operations.

    Implementation Notes:
    - Concrete implementations are in infrastructure layer
    - Methods return domain entities (User), not raw documents
    - All operations are async for non-blocking I/O
    """

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Create a new user.

        Args:
            user: User entity to create

        Returns:
            Created User entity with id populated

        Raises:
            ConflictError: If the email is already registered
            DatabaseError: If database operation fails
        """
        pass

    @abstractmethod
    async def get_by_id(self, user_id: str) -> Optional[User]:
        """
        Get user by ID.

        Args:
            user_id: User ID to find

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address (case-insensitive).

        Args:
            email: Email address to find

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_many(self, user_ids: List[str]) -> List[User]:
        """Get every existing user among ``user_ids``; missing ids are skipped."""
        pass

    @abstractmethod
    async def delete(self, user_id: str) -> int:
        """
        Delete the user with ``user_id``.

        Returns:
            Number of users deleted (0 when already gone)
        """
        pass

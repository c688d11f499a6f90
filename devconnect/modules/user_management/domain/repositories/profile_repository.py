# 📄 File: devconnect/modules/user_management/domain/repositories/profile_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for how to save, find and delete developer profiles
# 🧪 Purpose (Technical Summary):
# Repository interface defining data access operations for the Profile aggregate, including a keyed
# upsert that guarantees at most one profile per user
# 🔗 Dependencies:
# Domain models (Profile), typing, abc
# 🔄 Connected Modules / Calls From:
# profile_service.py, account_service.py, profile_repository_impl.py

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..models.profile import Profile


class ProfileRepository(ABC):
    """
    Repository interface for Profile aggregate data access operations.

    Implementation Notes:
    - Profiles are keyed by their owning user id
    - Methods return domain entities (Profile) without the owner join;
      joining is the service's job
    - All operations are async for non-blocking I/O
    """

    @abstractmethod
    async def upsert_for_user(self, user_id: str, fields: Dict[str, Any]) -> Profile:
        """
        Create or update the profile of ``user_id`` in one atomic step.

        Args:
            user_id: Owning user ID
            fields: Flat field map; dotted keys (``social.twitter``) address nested fields

        Returns:
            The resulting Profile
        """
        pass

    @abstractmethod
    async def get_by_user_id(self, user_id: str) -> Optional[Profile]:
        """
        Get profile by user ID.

        Args:
            user_id: User ID to find profile for

        Returns:
            Profile entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[Profile]:
        """Get all profiles."""
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """
        Persist a loaded profile after nested list changes.

        Raises:
            NotFoundError: If the profile was deleted meanwhile
        """
        pass

    @abstractmethod
    async def delete_by_user_id(self, user_id: str) -> int:
        """Delete the profile of ``user_id``; returns 0 when there is none."""
        pass

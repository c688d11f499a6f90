# 📄 File: devconnect/modules/community/domain/repositories/post_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for how to save, find and delete posts on the community feed
# 🧪 Purpose (Technical Summary):
# Repository interface defining data access operations for the Post aggregate following the Repository pattern
# 🔗 Dependencies:
# Domain models (Post), typing, abc
# 🔄 Connected Modules / Calls From:
# post_service.py, account_service.py (cascading delete), post_repository_impl.py

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.post import Post


class PostRepository(ABC):
    """
    Repository interface for Post aggregate data access operations.

    Likes and comments are embedded, so every engagement change is a
    read of the post followed by one ``save``.
    """

    @abstractmethod
    async def create(self, post: Post) -> Post:
        """
        Create a new post.

        Args:
            post: Post entity to create

        Returns:
            Created Post with id populated
        """
        pass

    @abstractmethod
    async def get_by_id(self, post_id: str) -> Optional[Post]:
        """
        Get post by ID.

        Args:
            post_id: Post ID to find

        Returns:
            Post entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_newest_first(self) -> List[Post]:
        """Get all posts ordered by creation time, newest first."""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """
        Persist a loaded post after like/comment changes.

        Raises:
            NotFoundError: If the post was deleted meanwhile
        """
        pass

    @abstractmethod
    async def delete(self, post_id: str) -> int:
        """Delete one post; returns the number deleted."""
        pass

    @abstractmethod
    async def delete_by_user_id(self, user_id: str) -> int:
        """Delete every post owned by ``user_id``; returns the number deleted."""
        pass

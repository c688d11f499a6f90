# 📄 File: devconnect/modules/community/domain/services/post_service.py
# 🧭 Purpose (Layman Explanation):
# Runs the community feed: writing and deleting posts, liking and unliking them, and
# adding or removing comments, while making sure you can only delete what is yours
# 🧪 Purpose (Technical Summary):
# Domain service for the Post aggregate: author snapshots on create, newest-first listing,
# ownership checks on delete, duplicate-action checks on like/unlike, comment list mutation
# 🔗 Dependencies:
# Post models, PostRepository, UserRepository, devconnect.shared.core.exceptions,
# devconnect.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# devconnect.shared.core.dependencies, posts API endpoints

import logging
from typing import List

from devconnect.modules.user_management.domain.models.user import User
from devconnect.modules.user_management.domain.repositories.user_repository import UserRepository
from devconnect.shared.core.exceptions import (
    AuthorizationError,
    ConflictError,
    InvalidIdentifierError,
    NotFoundError,
)
from devconnect.shared.utils.identifiers import is_valid_object_id
from devconnect.shared.utils.logging import get_logger

from ..models.post import Comment, Like, Post
from ..repositories.post_repository import PostRepository

logger = logging.getLogger(__name__)
audit = get_logger(__name__)


class PostService:
    """
    Domain service for posts, likes and comments.

    Each operation loads the post, checks presence and ownership or
    duplicate actions, applies one list change, and writes once.
    Concurrent likes from the same user may race; the store is the
    only synchronization point.
    """

    def __init__(self, post_repository: PostRepository, user_repository: UserRepository):
        self.post_repository = post_repository
        self.user_repository = user_repository

    # =========================================================================
    # POSTS
    # =========================================================================

    async def create_post(self, user_id: str, text: str) -> Post:
        """
        Create a post with the author's current name and avatar.

        Raises:
            NotFoundError: If the author no longer exists
        """
        author = await self._require_user(user_id)

        post = Post(user=user_id, text=text, name=author.name, avatar=author.avatar)
        created = await self.post_repository.create(post)

        audit.log_user_action("create_post", user_id, resource=f"post:{created.id}")
        return created

    async def list_posts(self) -> List[Post]:
        """Get all posts, newest first."""
        return await self.post_repository.list_newest_first()

    async def get_post(self, post_id: str) -> Post:
        """
        Get one post.

        Raises:
            NotFoundError: If the id is malformed or the post does not exist
        """
        return await self._require_post(post_id)

    async def delete_post(self, user_id: str, post_id: str) -> str:
        """
        Delete a post owned by the caller.

        Returns:
            Confirmation message

        Raises:
            NotFoundError: If the post does not exist
            AuthorizationError: If the caller does not own the post
        """
        post = await self._require_post(post_id)

        if not post.is_owned_by(user_id):
            audit.security.log_authorization(user_id, f"post:{post_id}", "delete", False,
                                             reason="not_owner")
            raise AuthorizationError(
                "This is not your post",
                resource_type="post",
                resource_id=post_id,
                required_action="delete",
            )

        await self.post_repository.delete(post_id)
        audit.log_user_action("delete_post", user_id, resource=f"post:{post_id}")
        return "Post deleted"

    # =========================================================================
    # LIKES
    # =========================================================================

    async def like_post(self, user_id: str, post_id: str) -> List[Like]:
        """
        Like a post once.

        Returns:
            The post's like list, newest first

        Raises:
            NotFoundError: If the post does not exist
            ConflictError: If the caller already liked the post
        """
        post = await self._require_post(post_id)

        if post.like_by(user_id) is not None:
            raise ConflictError("Post already liked", resource_type="like", conflict_field="user",
                                existing_value=user_id)

        post.add_like(user_id)
        saved = await self.post_repository.save(post)

        audit.log_user_action("like_post", user_id, resource=f"post:{post_id}")
        return saved.likes

    async def unlike_post(self, user_id: str, post_id: str) -> List[Like]:
        """
        Remove the caller's like.

        Returns:
            The post's remaining like list

        Raises:
            NotFoundError: If the post does not exist
            ConflictError: If the caller has not liked the post
        """
        post = await self._require_post(post_id)

        like = post.like_by(user_id)
        if like is None:
            raise ConflictError("Post wasn't liked", resource_type="like", conflict_field="user")

        post.remove_like(like.id)
        saved = await self.post_repository.save(post)

        audit.log_user_action("unlike_post", user_id, resource=f"post:{post_id}")
        return saved.likes

    # =========================================================================
    # COMMENTS
    # =========================================================================

    async def add_comment(self, user_id: str, post_id: str, text: str) -> List[Comment]:
        """
        Comment on a post with the commenter's current name and avatar.

        Returns:
            The post's comment list, newest first

        Raises:
            NotFoundError: If the post or the commenter does not exist
        """
        post = await self._require_post(post_id)
        author = await self._require_user(user_id)

        comment = Comment(user=user_id, text=text, name=author.name, avatar=author.avatar)
        post.add_comment(comment)
        saved = await self.post_repository.save(post)

        audit.log_user_action("add_comment", user_id, resource=f"comment:{comment.id}")
        return saved.comments

    async def delete_comment(self, user_id: str, post_id: str, comment_id: str) -> List[Comment]:
        """
        Delete one of the caller's comments.

        Returns:
            The post's remaining comment list

        Raises:
            NotFoundError: If the post or the comment does not exist
            AuthorizationError: If the caller did not write the comment
        """
        post = await self._require_post(post_id)

        comment = post.find_comment(comment_id)
        if comment is None:
            raise NotFoundError("Comment not found", resource_type="comment", resource_id=comment_id)

        if comment.user != user_id:
            audit.security.log_authorization(user_id, f"comment:{comment_id}", "delete", False,
                                             reason="not_author")
            raise AuthorizationError(
                "This is not your comment",
                resource_type="comment",
                resource_id=comment_id,
                required_action="delete",
            )

        post.remove_comment(comment_id)
        saved = await self.post_repository.save(post)

        audit.log_user_action("delete_comment", user_id, resource=f"comment:{comment_id}")
        return saved.comments

    # =========================================================================
    # HELPERS
    # =========================================================================

    async def _require_post(self, post_id: str) -> Post:
        if not is_valid_object_id(post_id):
            raise InvalidIdentifierError(post_id, message="Post not found", resource_type="post")

        post = await self.post_repository.get_by_id(post_id)
        if post is None:
            raise NotFoundError("Post not found", resource_type="post", resource_id=post_id)
        return post

    async def _require_user(self, user_id: str) -> User:
        user = await self.user_repository.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found", resource_type="user", resource_id=user_id)
        return user

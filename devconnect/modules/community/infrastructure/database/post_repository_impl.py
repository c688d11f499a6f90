# 📄 File: devconnect/modules/community/infrastructure/database/post_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles the database work for feed posts: saving new ones, listing the feed
# newest first, and storing likes and comments as they come in.
#
# 🧪 Purpose (Technical Summary):
# Concrete implementation of the PostRepository interface on top of the DocumentStore,
# mapping between Post aggregates and "posts" collection documents.
#
# 🔗 Dependencies:
# - devconnect.modules.community.domain.repositories.post_repository (interface)
# - devconnect.modules.community.domain.models.post (domain model)
# - devconnect.shared.infrastructure.database (DocumentStore, DESCENDING)
#
# 🔄 Connected Modules / Calls From:
# - devconnect.shared.core.dependencies (repository construction)
# - post_service.py, account_service.py

import logging
from typing import List, Optional

from devconnect.modules.community.domain.models.post import Post
from devconnect.modules.community.domain.repositories.post_repository import PostRepository
from devconnect.shared.core.exceptions import NotFoundError
from devconnect.shared.infrastructure.database import DESCENDING, DocumentStore

logger = logging.getLogger(__name__)

POSTS = "posts"


class PostRepositoryImpl(PostRepository):
    """
    Document store implementation of the PostRepository interface.
    """

    def __init__(self, store: DocumentStore):
        self._store = store

    async def create(self, post: Post) -> Post:
        document = await self._store.insert(POSTS, post.to_document())
        logger.info(f"Created post with ID: {document['id']}")
        return Post.model_validate(document)

    async def get_by_id(self, post_id: str) -> Optional[Post]:
        if not self._store.is_valid_id(post_id):
            return None
        document = await self._store.find_by_id(POSTS, post_id)
        return Post.model_validate(document) if document else None

    async def list_newest_first(self) -> List[Post]:
        documents = await self._store.find(POSTS, sort=[("created_at", DESCENDING)])
        return [Post.model_validate(doc) for doc in documents]

    async def save(self, post: Post) -> Post:
        document = await self._store.replace(POSTS, post.id, post.to_document())
        if document is None:
            raise NotFoundError("Post not found", resource_type="post", resource_id=post.id)
        return Post.model_validate(document)

    async def delete(self, post_id: str) -> int:
        return await self._store.delete_one(POSTS, {"id": post_id})

    async def delete_by_user_id(self, user_id: str) -> int:
        deleted = await self._store.delete_many(POSTS, {"user": user_id})
        logger.debug(f"Deleted {deleted} post(s) owned by user: {user_id}")
        return deleted

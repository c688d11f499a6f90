# 📄 File: devconnect/modules/user_management/infrastructure/database/user_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles the database work for developer accounts: saving new sign-ups,
# looking people up by id or email, and removing accounts.
#
# 🧪 Purpose (Technical Summary):
# Concrete implementation of the UserRepository interface on top of the DocumentStore,
# mapping between User domain entities and "users" collection documents.
#
# 🔗 Dependencies:
# - devconnect.modules.user_management.domain.repositories.user_repository (interface)
# - devconnect.modules.user_management.domain.models.user (domain model)
# - devconnect.shared.infrastructure.database (DocumentStore)
#
# 🔄 Connected Modules / Calls From:
# - devconnect.shared.core.dependencies (repository construction)
# - Domain services (auth, profile, account, post)

import logging
from typing import List, Optional

from devconnect.modules.user_management.domain.models.user import User
from devconnect.modules.user_management.domain.repositories.user_repository import UserRepository
from devconnect.shared.infrastructure.database import DocumentStore

logger = logging.getLogger(__name__)

USERS = "users"


class UserRepositoryImpl(UserRepository):
    """
    Document store implementation of the UserRepository interface.
    """

    def __init__(self, store: DocumentStore):
        """
        Initialize the user repository.

        Args:
            store: Connected document store
        """
        self._store = store

    async def create(self, user: User) -> User:
        document = await self._store.insert(USERS, user.to_document())
        logger.info(f"Created user with ID: {document['id']}")
        return User.model_validate(document)

    async def get_by_id(self, user_id: str) -> Optional[User]:
        if not self._store.is_valid_id(user_id):
            return None
        document = await self._store.find_by_id(USERS, user_id)
        return User.model_validate(document) if document else None

    async def get_by_email(self, email: str) -> Optional[User]:
        document = await self._store.find_one(USERS, {"email": email.strip().lower()})
        return User.model_validate(document) if document else None

    async def get_many(self, user_ids: List[str]) -> List[User]:
        valid_ids = [uid for uid in set(user_ids) if self._store.is_valid_id(uid)]
        if not valid_ids:
            return []
        documents = await self._store.find(USERS, {"id": {"$in": valid_ids}})
        return [User.model_validate(doc) for doc in documents]

    async def delete(self, user_id: str) -> int:
        deleted = await self._store.delete_one(USERS, {"id": user_id})
        logger.debug(f"Deleted {deleted} user document(s) for {user_id}")
        return deleted

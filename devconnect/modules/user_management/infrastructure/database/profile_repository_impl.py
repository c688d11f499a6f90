# 📄 File: devconnect/modules/user_management/infrastructure/database/profile_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles all database operations for developer profiles, including the
# "create it if it's missing, otherwise update it" save used by the profile form.
#
# 🧪 Purpose (Technical Summary):
# Concrete implementation of the ProfileRepository interface on top of the DocumentStore,
# using the store's atomic upsert keyed by owning user and whole-document replace for
# nested list changes.
#
# 🔗 Dependencies:
# - devconnect.modules.user_management.domain.repositories.profile_repository (interface)
# - devconnect.modules.user_management.domain.models.profile (domain model)
# - devconnect.shared.infrastructure.database (DocumentStore)
# - devconnect.shared.core.exceptions (NotFoundError)
#
# 🔄 Connected Modules / Calls From:
# - devconnect.shared.core.dependencies (repository construction)
# - Domain services (profile service, account service)

"""
Profile Repository Implementation

Maps between domain Profile aggregates and "profiles" collection documents.
The owning user id is the natural key; a unique index on it backs the
one-profile-per-user rule.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from devconnect.modules.user_management.domain.models.profile import Profile
from devconnect.modules.user_management.domain.repositories.profile_repository import ProfileRepository
from devconnect.shared.core.exceptions import NotFoundError
from devconnect.shared.infrastructure.database import DocumentStore

logger = logging.getLogger(__name__)

PROFILES = "profiles"


class ProfileRepositoryImpl(ProfileRepository):
    """
    Document store implementation of the ProfileRepository interface.
    """

    def __init__(self, store: DocumentStore):
        """
        Initialize the profile repository.

        Args:
            store: Connected document store
        """
        self._store = store

    async def upsert_for_user(self, user_id: str, fields: Dict[str, Any]) -> Profile:
        # Only written when the profile is created; never overlaps with fields
        on_insert = {
            "created_at": datetime.now(timezone.utc),
            "experience": [],
            "education": [],
        }
        document = await self._store.upsert(PROFILES, {"user": user_id}, fields, on_insert=on_insert)
        logger.debug(f"Upserted profile {document['id']} for user: {user_id}")
        return Profile.model_validate(document)

    async def get_by_user_id(self, user_id: str) -> Optional[Profile]:
        document = await self._store.find_one(PROFILES, {"user": user_id})
        return Profile.model_validate(document) if document else None

    async def list_all(self) -> List[Profile]:
        documents = await self._store.find(PROFILES)
        return [Profile.model_validate(doc) for doc in documents]

    async def save(self, profile: Profile) -> Profile:
        document = await self._store.replace(PROFILES, profile.id, profile.to_document())
        if document is None:
            raise NotFoundError("Profile not found", resource_type="profile", resource_id=profile.id)
        return Profile.model_validate(document)

    async def delete_by_user_id(self, user_id: str) -> int:
        deleted = await self._store.delete_one(PROFILES, {"user": user_id})
        logger.debug(f"Deleted {deleted} profile document(s) for user: {user_id}")
        return deleted

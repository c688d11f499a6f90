# 📄 File: devconnect/modules/user_management/domain/services/profile_service.py
# 🧭 Purpose (Layman Explanation):
# Manages developer profiles: filling in the profile form, showing profiles to others,
# and adding, changing or removing jobs and schools on your own profile
# 🧪 Purpose (Technical Summary):
# Domain service implementing the Profile aggregate's business logic: keyed upsert, owner
# joins on read, and ownership-scoped nested list mutation for experience and education
# 🔗 Dependencies:
# Domain models, ProfileRepository, UserRepository, devconnect.shared.core.exceptions,
# devconnect.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# devconnect.shared.core.dependencies, profile API endpoints

import logging
from typing import List

from devconnect.shared.core.exceptions import InvalidIdentifierError, NotFoundError, ValidationError
from devconnect.shared.utils.identifiers import is_valid_object_id
from devconnect.shared.utils.logging import get_logger

from ..models.profile import Education, Experience, Profile, ProfileFields, ProfileOwner
from ..repositories.profile_repository import ProfileRepository
from ..repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)
audit = get_logger(__name__)


class ProfileService:
    """
    Domain service for profile management business logic.

    Every mutation is scoped to the caller's own profile: the user id
    comes from the resolved token, never from the request body. Each
    operation validates first and writes once, so a failed call
    persists nothing.
    """

    def __init__(
        self,
        profile_repository: ProfileRepository,
        user_repository: UserRepository
    ):
        self.profile_repository = profile_repository
        self.user_repository = user_repository

    # =========================================================================
    # PROFILE
    # =========================================================================

    async def upsert_profile(self, user_id: str, fields: ProfileFields) -> Profile:
        """
        Create the user's profile or merge fields into the existing one.

        Only present fields are written; nothing omitted is removed.
        Social links merge per platform.

        Args:
            user_id: Owning user ID
            fields: Provided profile fields

        Returns:
            The resulting Profile with owner joined in
        """
        logger.info(f"Upserting profile for user: {user_id}")

        update = fields.to_update()
        profile = await self.profile_repository.upsert_for_user(user_id, update)

        audit.log_user_action("upsert_profile", user_id, resource=f"profile:{profile.id}",
                              extra={"fields": sorted(update)})
        return await self._with_owner(profile)

    async def get_own_profile(self, user_id: str) -> Profile:
        """
        Get the caller's profile.

        Raises:
            NotFoundError: If the user has no profile
        """
        profile = await self.profile_repository.get_by_user_id(user_id)
        if profile is None:
            raise NotFoundError(
                "There is no profile for this user",
                resource_type="profile",
                resource_id=user_id,
            )
        return await self._with_owner(profile)

    async def list_profiles(self) -> List[Profile]:
        """Get all profiles, each joined with its owner's name and avatar."""
        profiles = await self.profile_repository.list_all()
        audit.debug(f"Listing {len(profiles)} profiles", extra={"count": len(profiles)})
        return await self._join_owners(profiles)

    async def get_profile_by_user(self, user_id: str) -> Profile:
        """
        Get the profile of any user.

        Raises:
            NotFoundError: If the id is malformed or the user has no profile
        """
        if not is_valid_object_id(user_id):
            raise InvalidIdentifierError(user_id, message="Profile not found", resource_type="profile")

        profile = await self.profile_repository.get_by_user_id(user_id)
        if profile is None:
            raise NotFoundError("Profile not found", resource_type="profile", resource_id=user_id)
        return await self._with_owner(profile)

    # =========================================================================
    # EXPERIENCE
    # =========================================================================

    async def add_experience(self, user_id: str, experience: Experience) -> Profile:
        """
        Add an experience entry at the head of the caller's list.

        Raises:
            NotFoundError: If the user has no profile
            ValidationError: If the entry ends before it starts
        """
        logger.info(f"Adding experience for user: {user_id}")

        # 1. Get profile
        profile = await self._require_profile(user_id)

        # 2. Validate date order
        self._check_experience_dates(experience)

        # 3. Insert at head and persist
        profile.add_experience(experience)
        saved = await self.profile_repository.save(profile)

        audit.log_user_action("add_experience", user_id, resource=f"experience:{experience.id}")
        return await self._with_owner(saved)

    async def update_experience(self, user_id: str, experience_id: str, experience: Experience) -> Profile:
        """
        Replace one experience entry in place.

        Raises:
            NotFoundError: If the user has no profile or no entry has ``experience_id``
            ValidationError: If the new entry ends before it starts
        """
        logger.info(f"Updating experience {experience_id} for user: {user_id}")

        profile = await self._require_profile(user_id)

        index = profile.find_experience_index(experience_id)
        if index is None:
            raise NotFoundError("Experience not found", resource_type="experience", resource_id=experience_id)

        self._check_experience_dates(experience)

        profile.replace_experience(index, experience)
        saved = await self.profile_repository.save(profile)

        audit.log_user_action("update_experience", user_id, resource=f"experience:{experience_id}")
        return await self._with_owner(saved)

    async def remove_experience(self, user_id: str, experience_id: str) -> Profile:
        """
        Remove exactly one experience entry.

        Raises:
            NotFoundError: If the user has no profile or no entry has ``experience_id``
        """
        logger.info(f"Removing experience {experience_id} for user: {user_id}")

        profile = await self._require_profile(user_id)

        index = profile.find_experience_index(experience_id)
        if index is None:
            raise NotFoundError("Experience not found", resource_type="experience", resource_id=experience_id)

        profile.remove_experience(index)
        saved = await self.profile_repository.save(profile)

        audit.log_user_action("remove_experience", user_id, resource=f"experience:{experience_id}")
        return await self._with_owner(saved)

    # =========================================================================
    # EDUCATION
    # =========================================================================

    async def add_education(self, user_id: str, education: Education) -> Profile:
        """
        Add an education entry at the head of the caller's list.

        Raises:
            NotFoundError: If the user has no profile
        """
        logger.info(f"Adding education for user: {user_id}")

        profile = await self._require_profile(user_id)
        profile.add_education(education)
        saved = await self.profile_repository.save(profile)

        audit.log_user_action("add_education", user_id, resource=f"education:{education.id}")
        return await self._with_owner(saved)

    async def update_education(self, user_id: str, education_id: str, education: Education) -> Profile:
        """
        Replace one education entry in place.

        Raises:
            NotFoundError: If the user has no profile or no entry has ``education_id``
        """
        logger.info(f"Updating education {education_id} for user: {user_id}")

        profile = await self._require_profile(user_id)

        index = profile.find_education_index(education_id)
        if index is None:
            raise NotFoundError("Education not found", resource_type="education", resource_id=education_id)

        profile.replace_education(index, education)
        saved = await self.profile_repository.save(profile)

        audit.log_user_action("update_education", user_id, resource=f"education:{education_id}")
        return await self._with_owner(saved)

    async def remove_education(self, user_id: str, education_id: str) -> Profile:
        """
        Remove exactly one education entry.

        Raises:
            NotFoundError: If the user has no profile or no entry has ``education_id``
        """
        logger.info(f"Removing education {education_id} for user: {user_id}")

        profile = await self._require_profile(user_id)

        index = profile.find_education_index(education_id)
        if index is None:
            raise NotFoundError("Education not found", resource_type="education", resource_id=education_id)

        profile.remove_education(index)
        saved = await self.profile_repository.save(profile)

        audit.log_user_action("remove_education", user_id, resource=f"education:{education_id}")
        return await self._with_owner(saved)

    # =========================================================================
    # HELPERS
    # =========================================================================

    async def _require_profile(self, user_id: str) -> Profile:
        profile = await self.profile_repository.get_by_user_id(user_id)
        if profile is None:
            raise NotFoundError(
                "There is no profile for this user",
                resource_type="profile",
                resource_id=user_id,
            )
        return profile

    @staticmethod
    def _check_experience_dates(experience: Experience) -> None:
        if not experience.has_valid_dates():
            raise ValidationError(
                "From or to Date is incorrect",
                field="to_date",
                value=experience.to_date,
                constraint="from_date <= to_date",
            )

    async def _with_owner(self, profile: Profile) -> Profile:
        joined = await self._join_owners([profile])
        return joined[0]

    async def _join_owners(self, profiles: List[Profile]) -> List[Profile]:
        if not profiles:
            return profiles

        users = await self.user_repository.get_many([p.user for p in profiles])
        owners = {
            user.id: ProfileOwner(id=user.id, name=user.name, avatar=user.avatar)
            for user in users
        }
        for profile in profiles:
            profile.owner = owners.get(profile.user)
        return profiles

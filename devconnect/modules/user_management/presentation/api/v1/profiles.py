# 📄 File: devconnect/modules/user_management/presentation/api/v1/profiles.py
# 🧭 Purpose (Layman Explanation):
# All the web endpoints for developer profiles: creating and editing your own profile,
# browsing everyone's profiles, keeping your job and school history up to date, and
# closing your account.
#
# 🧪 Purpose (Technical Summary):
# FastAPI profile endpoints delegating to ProfileService (upsert, reads with owner join,
# experience/education list mutation) and AccountService (cascading account deletion).
#
# 🔗 Dependencies:
# - FastAPI router, status codes
# - devconnect.shared.core.dependencies (service factories, get_current_user)
# - profile_schemas (request/response schemas)
#
# 🔄 Connected Modules / Calls From:
# - devconnect.api.v1.router (mounted under /profile)
# - Frontend dashboard, developer list and profile pages

"""
Profile Management API Endpoints

Endpoints:
- GET /me: Current user's profile
- POST /: Create or update current user's profile
- GET /: All profiles
- GET /user/{user_id}: Profile of any user
- DELETE /: Delete account, profile and posts
- PUT /experience, PUT|DELETE /experience/{exp_id}: Experience entries
- PUT /education, PUT|DELETE /education/{edu_id}: Education entries

Every profile response carries the owner's name and avatar.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, status

from devconnect.modules.user_management.domain.services.account_service import AccountService
from devconnect.modules.user_management.domain.services.profile_service import ProfileService
from devconnect.modules.user_management.presentation.api.schemas.profile_schemas import (
    AccountDeletionResponse,
    EducationRequest,
    ExperienceRequest,
    ProfileResponse,
    ProfileUpsertRequest,
)
from devconnect.shared.core.dependencies import (
    CurrentUser,
    get_account_service,
    get_current_user,
    get_profile_service,
)

logger = logging.getLogger(__name__)

profiles_router = APIRouter()

_PRIVATE_RESPONSES = {
    401: {"description": "Missing, invalid or expired token"},
    404: {"description": "Profile or entry not found"},
}


# =========================================================================
# PROFILE
# =========================================================================

@profiles_router.get(
    "/me",
    response_model=ProfileResponse,
    summary="Get my profile",
    description="Get the authenticated user's profile",
    responses=_PRIVATE_RESPONSES,
)
async def get_my_profile(
    current_user: CurrentUser = Depends(get_current_user),
    profile_service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    profile = await profile_service.get_own_profile(current_user.user_id)
    return ProfileResponse.from_domain(profile)


@profiles_router.post(
    "",
    response_model=ProfileResponse,
    summary="Create or update my profile",
    description="Create the profile on first call; afterwards merge the provided fields",
    responses={
        400: {"description": "Status or skills missing"},
        401: {"description": "Missing, invalid or expired token"},
    },
)
async def upsert_my_profile(
    profile_data: ProfileUpsertRequest,
    current_user: CurrentUser = Depends(get_current_user),
    profile_service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """
    Create or update the authenticated user's profile.

    Fields left out of the request are kept as they are. ``skills`` is
    replaced as a whole; social links are merged per platform.
    """
    profile = await profile_service.upsert_profile(current_user.user_id, profile_data.to_domain())
    return ProfileResponse.from_domain(profile)


@profiles_router.get(
    "",
    response_model=List[ProfileResponse],
    summary="List profiles",
    description="Get every developer profile",
)
async def list_profiles(
    profile_service: ProfileService = Depends(get_profile_service),
) -> List[ProfileResponse]:
    profiles = await profile_service.list_profiles()
    return [ProfileResponse.from_domain(p) for p in profiles]


@profiles_router.get(
    "/user/{user_id}",
    response_model=ProfileResponse,
    summary="Get profile by user",
    description="Get the profile of the given user",
    responses={404: {"description": "Profile not found"}},
)
async def get_profile_by_user(
    user_id: str,
    profile_service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    profile = await profile_service.get_profile_by_user(user_id)
    return ProfileResponse.from_domain(profile)


@profiles_router.delete(
    "",
    response_model=AccountDeletionResponse,
    summary="Delete my account",
    description="Delete the authenticated user's posts, profile and account",
    responses={
        401: {"description": "Missing, invalid or expired token"},
        500: {"description": "Deletion stopped part way; retrying completes it"},
    },
)
async def delete_my_account(
    current_user: CurrentUser = Depends(get_current_user),
    account_service: AccountService = Depends(get_account_service),
) -> AccountDeletionResponse:
    """
    Delete the authenticated user and everything they own.

    Posts go first, then the profile, then the user record. A failure
    part way leaves earlier steps applied; calling again finishes the job.
    """
    report = await account_service.delete_account(current_user.user_id)
    return AccountDeletionResponse.from_domain(report)


# =========================================================================
# EXPERIENCE
# =========================================================================

@profiles_router.put(
    "/experience",
    response_model=ProfileResponse,
    summary="Add experience",
    description="Add a job entry to the top of the authenticated user's experience list",
    responses={400: {"description": "Missing fields or incorrect dates"}, **_PRIVATE_RESPONSES},
)
async def add_experience(
    experience_data: ExperienceRequest,
    current_user: CurrentUser = Depends(get_current_user),
    profile_service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    profile = await profile_service.add_experience(current_user.user_id, experience_data.to_domain())
    return ProfileResponse.from_domain(profile)


@profiles_router.put(
    "/experience/{exp_id}",
    response_model=ProfileResponse,
    summary="Update experience",
    description="Replace a job entry, keeping its position and id",
    responses={400: {"description": "Missing fields or incorrect dates"}, **_PRIVATE_RESPONSES},
)
async def update_experience(
    exp_id: str,
    experience_data: ExperienceRequest,
    current_user: CurrentUser = Depends(get_current_user),
    profile_service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    profile = await profile_service.update_experience(
        current_user.user_id, exp_id, experience_data.to_domain()
    )
    return ProfileResponse.from_domain(profile)


@profiles_router.delete(
    "/experience/{exp_id}",
    response_model=ProfileResponse,
    summary="Delete experience",
    description="Remove a job entry from the authenticated user's profile",
    responses=_PRIVATE_RESPONSES,
)
async def remove_experience(
    exp_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    profile_service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    profile = await profile_service.remove_experience(current_user.user_id, exp_id)
    return ProfileResponse.from_domain(profile)


# =========================================================================
# EDUCATION
# =========================================================================

@profiles_router.put(
    "/education",
    response_model=ProfileResponse,
    summary="Add education",
    description="Add a school entry to the top of the authenticated user's education list",
    responses={400: {"description": "Missing fields"}, **_PRIVATE_RESPONSES},
)
async def add_education(
    education_data: EducationRequest,
    current_user: CurrentUser = Depends(get_current_user),
    profile_service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    profile = await profile_service.add_education(current_user.user_id, education_data.to_domain())
    return ProfileResponse.from_domain(profile)


@profiles_router.put(
    "/education/{edu_id}",
    response_model=ProfileResponse,
    summary="Update education",
    description="Replace a school entry, keeping its position and id",
    responses={400: {"description": "Missing fields"}, **_PRIVATE_RESPONSES},
)
async def update_education(
    edu_id: str,
    education_data: EducationRequest,
    current_user: CurrentUser = Depends(get_current_user),
    profile_service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    profile = await profile_service.update_education(
        current_user.user_id, edu_id, education_data.to_domain()
    )
    return ProfileResponse.from_domain(profile)


@profiles_router.delete(
    "/education/{edu_id}",
    response_model=ProfileResponse,
    summary="Delete education",
    description="Remove a school entry from the authenticated user's profile",
    responses=_PRIVATE_RESPONSES,
)
async def remove_education(
    edu_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    profile_service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    profile = await profile_service.remove_education(current_user.user_id, edu_id)
    return ProfileResponse.from_domain(profile)

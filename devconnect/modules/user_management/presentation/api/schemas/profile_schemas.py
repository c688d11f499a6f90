# 📄 File: devconnect/modules/user_management/presentation/api/schemas/profile_schemas.py
# 🧭 Purpose (Layman Explanation):
# This file defines the data formats for profile requests and responses: the profile form,
# the job and school entries, and the profile pages the app sends back.
#
# 🧪 Purpose (Technical Summary):
# Pydantic profile schemas for request validation (required status/skills, required experience
# and education fields, legacy "from"/"to"/"fieldofstudy" aliases) and response serialization
# with the joined owner.
#
# 🔗 Dependencies:
# - pydantic for schema validation and serialization
# - devconnect.modules.user_management.domain.models.profile (domain conversion)
#
# 🔄 Connected Modules / Calls From:
# - devconnect.modules.user_management.presentation.api.v1.profiles
# - FastAPI automatic request validation and response serialization

"""
Profile Management API Schemas

Request Schemas:
- ProfileUpsertRequest: Create-or-update profile fields
- ExperienceRequest: One job entry
- EducationRequest: One school entry

Response Schemas:
- ProfileResponse: Profile with experience, education and owner
- AccountDeletionResponse: Account deletion counts
"""

from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from devconnect.modules.user_management.domain.models.profile import (
    Education,
    Experience,
    Profile,
    ProfileFields,
)
from devconnect.modules.user_management.domain.services.account_service import AccountDeletionReport


def _require_text(v: str, label: str) -> str:
    if not v or not v.strip():
        raise ValueError(f"{label} is required")
    return v.strip()


# =========================================================================
# REQUEST SCHEMAS
# =========================================================================

class ProfileUpsertRequest(BaseModel):
    """
    Profile create-or-update request schema.

    ``status`` and ``skills`` are required; every other field is applied
    only when provided. ``skills`` is a comma-separated string.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "status": "Developer",
                "skills": "python, fastapi, mongodb",
                "company": "Acme",
                "website": "https://alice.dev",
                "location": "Berlin",
                "bio": "Backend developer",
                "github_username": "alice",
                "twitter": "https://twitter.com/alice",
            }
        },
    )

    status: str = Field(..., description="Professional status, e.g. Developer")
    skills: Union[str, List[str]] = Field(..., description="Comma-separated skills")

    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    github_username: Optional[str] = Field(default=None, alias="githubusername")

    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None

    @field_validator("status")
    @classmethod
    def validate_status(cls, v: str) -> str:
        return _require_text(v, "Status")

    @field_validator("skills")
    @classmethod
    def validate_skills(cls, v):
        if isinstance(v, str):
            _require_text(v, "Skills")
        elif not [s for s in v if s and s.strip()]:
            raise ValueError("Skills is required")
        return v

    def to_domain(self) -> ProfileFields:
        return ProfileFields(**self.model_dump())


class _DatedEntryRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_date: datetime = Field(..., alias="from", description="Start date (YYYY-MM-DD)")
    to_date: Optional[datetime] = Field(default=None, alias="to", description="End date, empty if current")
    current: bool = False
    description: Optional[str] = None

    @field_validator("to_date", mode="before")
    @classmethod
    def blank_to_date_is_absent(cls, v):
        # The web form sends to: "" for current positions
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ExperienceRequest(_DatedEntryRequest):
    """
    Experience entry request schema.

    Dates are accepted as ``from``/``to`` or ``from_date``/``to_date``.
    """

    title: str
    company: str
    location: Optional[str] = None

    @field_validator("title", "company")
    @classmethod
    def validate_required(cls, v: str, info) -> str:
        return _require_text(v, info.field_name.capitalize())

    def to_domain(self) -> Experience:
        return Experience(**self.model_dump())


class EducationRequest(_DatedEntryRequest):
    """Education entry request schema."""

    school: str
    degree: str
    field_of_study: str = Field(..., alias="fieldofstudy")

    @field_validator("school", "degree", "field_of_study")
    @classmethod
    def validate_required(cls, v: str, info) -> str:
        return _require_text(v, info.field_name.replace("_", " ").capitalize())

    def to_domain(self) -> Education:
        return Education(**self.model_dump())


# =========================================================================
# RESPONSE SCHEMAS
# =========================================================================

class SocialLinksResponse(BaseModel):
    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None


class OwnerResponse(BaseModel):
    id: str
    name: str
    avatar: Optional[str] = None


class ExperienceResponse(BaseModel):
    id: str
    title: str
    company: str
    location: Optional[str] = None
    from_date: datetime
    to_date: Optional[datetime] = None
    current: bool
    description: Optional[str] = None


class EducationResponse(BaseModel):
    id: str
    school: str
    degree: str
    field_of_study: str
    from_date: datetime
    to_date: Optional[datetime] = None
    current: bool
    description: Optional[str] = None


class ProfileResponse(BaseModel):
    """
    Profile response schema.

    ``user`` is the owner join (name and avatar); it is null only when
    the owning account has disappeared.
    """

    id: str = Field(..., description="Profile ID")
    user_id: str = Field(..., description="Owning user ID")
    user: Optional[OwnerResponse] = Field(default=None, description="Owner name and avatar")

    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    status: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    bio: Optional[str] = None
    github_username: Optional[str] = None
    social: SocialLinksResponse = Field(default_factory=SocialLinksResponse)

    experience: List[ExperienceResponse] = Field(default_factory=list)
    education: List[EducationResponse] = Field(default_factory=list)

    created_at: datetime

    @classmethod
    def from_domain(cls, profile: Profile) -> "ProfileResponse":
        data = profile.model_dump(exclude={"user", "owner"})
        return cls(
            user_id=profile.user,
            user=profile.owner.model_dump() if profile.owner else None,
            **data,
        )


class AccountDeletionResponse(BaseModel):
    """Account deletion confirmation with per-step counts."""

    msg: str = "User deleted"
    posts_deleted: int
    profiles_deleted: int
    users_deleted: int

    @classmethod
    def from_domain(cls, report: AccountDeletionReport) -> "AccountDeletionResponse":
        return cls(**report.model_dump(exclude={"user_id"}))

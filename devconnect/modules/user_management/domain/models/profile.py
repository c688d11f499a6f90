# 📄 File: devconnect/modules/user_management/domain/models/profile.py
# 🧭 Purpose (Layman Explanation):
# Defines a developer's profile page: where they work, their skills, their social links,
# and the lists of jobs and schools they have been through
# 🧪 Purpose (Technical Summary):
# Domain model for the Profile aggregate with embedded Experience and Education lists,
# pure list mutation methods (head insert, replace/remove by item id) and date ordering rules
# 🔗 Dependencies:
# pydantic, datetime, typing, devconnect.shared.utils.identifiers (nested item ids)
# 🔄 Connected Modules / Calls From:
# profile_service.py, profile_repository.py, profile_repository_impl.py, profile_schemas.py

from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from devconnect.shared.utils.identifiers import new_object_id

SOCIAL_PLATFORMS = ("youtube", "twitter", "facebook", "linkedin", "instagram")


def _as_utc_datetime(value: Any) -> Any:
    """Accept dates and naive datetimes; everything is stored as aware UTC."""
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    return value


class SocialLinks(BaseModel):
    """Links to the owner's accounts on other platforms"""
    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None


class ProfileOwner(BaseModel):
    """Owner name and avatar joined in at read time; never persisted"""
    id: str
    name: str
    avatar: Optional[str] = None


class _DatedEntry(BaseModel):
    """Shared shape of experience and education entries"""

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(default_factory=new_object_id)
    from_date: datetime
    to_date: Optional[datetime] = None
    current: bool = False
    description: Optional[str] = None

    @field_validator("from_date", "to_date", mode="before")
    @classmethod
    def coerce_dates(cls, v):
        return _as_utc_datetime(v)

    @field_validator("from_date", "to_date")
    @classmethod
    def ensure_utc(cls, v):
        return _as_utc_datetime(v)


class Experience(_DatedEntry):
    """
    A job held by the profile owner.

    When it has an end date, it must not end before it started.
    """
    title: str
    company: str
    location: Optional[str] = None

    def has_valid_dates(self) -> bool:
        if self.to_date is None:
            return True
        return self.from_date <= self.to_date


class Education(_DatedEntry):
    """A school attended by the profile owner. Dates are not cross-checked."""
    school: str
    degree: str
    field_of_study: str


class Profile(BaseModel):
    """
    Profile aggregate root. One per user.

    - user (ObjectId string): owning user, immutable once set
    - status, skills: required at the API boundary
    - experience, education: newest entries first
    - owner: read-time join of the user's name and avatar
    """

    model_config = ConfigDict(validate_assignment=True)

    id: Optional[str] = None
    user: str = Field(..., frozen=True)

    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    status: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    bio: Optional[str] = None
    github_username: Optional[str] = None
    social: SocialLinks = Field(default_factory=SocialLinks)

    experience: List[Experience] = Field(default_factory=list)
    education: List[Education] = Field(default_factory=list)

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    owner: Optional[ProfileOwner] = None

    # =========================================================================
    # EXPERIENCE
    # =========================================================================

    def find_experience_index(self, experience_id: str) -> Optional[int]:
        return _index_of(self.experience, experience_id)

    def add_experience(self, experience: Experience) -> None:
        """Insert at the head of the list (most recent first)."""
        self.experience.insert(0, experience)

    def replace_experience(self, index: int, experience: Experience) -> None:
        """Replace in place, keeping the entry's id and position."""
        experience.id = self.experience[index].id
        self.experience[index] = experience

    def remove_experience(self, index: int) -> Experience:
        return self.experience.pop(index)

    # =========================================================================
    # EDUCATION
    # =========================================================================

    def find_education_index(self, education_id: str) -> Optional[int]:
        return _index_of(self.education, education_id)

    def add_education(self, education: Education) -> None:
        self.education.insert(0, education)

    def replace_education(self, index: int, education: Education) -> None:
        education.id = self.education[index].id
        self.education[index] = education

    def remove_education(self, index: int) -> Education:
        return self.education.pop(index)

    # =========================================================================
    # SERIALIZATION
    # =========================================================================

    def to_document(self) -> Dict[str, Any]:
        """Serialize for the document store (without id and joined owner)."""
        return self.model_dump(exclude={"id", "owner"})


def _index_of(items: List[_DatedEntry], item_id: str) -> Optional[int]:
    # Explicit search: a miss is reported, never mapped onto another entry
    for position, item in enumerate(items):
        if item.id == item_id:
            return position
    return None


def parse_skills(raw: str) -> List[str]:
    """Split a comma-separated skills string into trimmed, non-empty entries."""
    return [skill.strip() for skill in raw.split(",") if skill.strip()]


class ProfileFields(BaseModel):
    """
    Caller-supplied profile fields for create-or-update.

    A field counts as present when it is neither None nor empty; absent
    fields leave the stored value untouched.
    """
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    status: Optional[str] = None
    github_username: Optional[str] = None
    skills: Optional[Union[str, List[str]]] = None

    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None

    def to_update(self) -> Dict[str, Any]:
        """
        Flatten present fields into a store update map.

        Social links are emitted as ``social.<platform>`` keys so platforms
        the caller did not mention keep their stored value.

        Returns:
            Field map for ProfileRepository.upsert_for_user
        """
        update: Dict[str, Any] = {}

        for key in ("company", "website", "location", "bio", "status", "github_username"):
            value = getattr(self, key)
            if value:
                update[key] = value

        if self.skills:
            if isinstance(self.skills, str):
                skills = parse_skills(self.skills)
            else:
                skills = [s.strip() for s in self.skills if s and s.strip()]
            if skills:
                update["skills"] = skills

        for platform in SOCIAL_PLATFORMS:
            value = getattr(self, platform)
            if value:
                update[f"social.{platform}"] = value

        return update

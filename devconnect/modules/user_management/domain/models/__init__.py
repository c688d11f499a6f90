# 📄 File: devconnect/modules/user_management/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the core account data models - what we store about users and their profiles
# 🧪 Purpose (Technical Summary):
# Package initialization for domain models containing User and the Profile aggregate
# 🔗 Dependencies:
# Domain model classes, pydantic base models
# 🔄 Connected Modules / Calls From:
# Domain services, repositories, infrastructure layer, presentation schemas

from .user import PublicUser, User
from .profile import (
    Education,
    Experience,
    Profile,
    ProfileFields,
    ProfileOwner,
    SocialLinks,
    parse_skills,
)

__all__ = [
    "User",
    "PublicUser",
    "Profile",
    "ProfileFields",
    "ProfileOwner",
    "SocialLinks",
    "Experience",
    "Education",
    "parse_skills",
]

# 📄 File: devconnect/modules/user_management/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# The list of storage promises the account area relies on
# 🧪 Purpose (Technical Summary):
# Repository interfaces for User and Profile
# 🔗 Dependencies:
# Domain models, abc
# 🔄 Connected Modules / Calls From:
# Domain services, infrastructure implementations

from .profile_repository import ProfileRepository
from .user_repository import UserRepository

__all__ = ["UserRepository", "ProfileRepository"]

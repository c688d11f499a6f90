# 📄 File: devconnect/modules/user_management/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# The account area's business rules: sign-up and login, profiles, and account closing
# 🧪 Purpose (Technical Summary):
# Domain services package exporting AuthService, IdentityResolver, ProfileService and AccountService
# 🔗 Dependencies:
# Domain models, repository interfaces, devconnect.shared.core
# 🔄 Connected Modules / Calls From:
# devconnect.shared.core.dependencies, presentation layer endpoints

from .account_service import AccountDeletionReport, AccountService
from .auth_service import AuthService, AuthToken, IdentityResolver
from .profile_service import ProfileService

__all__ = [
    "AccountService",
    "AccountDeletionReport",
    "AuthService",
    "AuthToken",
    "IdentityResolver",
    "ProfileService",
]

# 📄 File: devconnect/shared/core/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Hands each web request the tools it needs: the database, the services that do the work,
# and the identity of whoever sent the request.
# 🧪 Purpose (Technical Summary):
# Common FastAPI dependencies wiring app-scoped collaborators (settings, document store,
# security manager, created in the lifespan) into repositories, domain services, and the
# authenticated CurrentUser resolved from a bearer or x-auth-token header.
# 🔗 Dependencies:
# FastAPI, devconnect.shared.*, module repositories and domain services
# 🔄 Connected Modules / Calls From:
# All API v1 endpoints, devconnect.api.v1.health

"""
Common FastAPI dependencies for the DevConnect application.
Provides store access, service construction and user authentication.
"""

import logging
from typing import Optional

from fastapi import Depends, Header, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from devconnect.modules.community.domain.repositories.post_repository import PostRepository
from devconnect.modules.community.domain.services.post_service import PostService
from devconnect.modules.community.infrastructure.database.post_repository_impl import PostRepositoryImpl
from devconnect.modules.user_management.domain.repositories.profile_repository import ProfileRepository
from devconnect.modules.user_management.domain.repositories.user_repository import UserRepository
from devconnect.modules.user_management.domain.services.account_service import AccountService
from devconnect.modules.user_management.domain.services.auth_service import AuthService, IdentityResolver
from devconnect.modules.user_management.domain.services.profile_service import ProfileService
from devconnect.modules.user_management.infrastructure.database.profile_repository_impl import ProfileRepositoryImpl
from devconnect.modules.user_management.infrastructure.database.user_repository_impl import UserRepositoryImpl
from devconnect.shared.config.settings import Settings
from devconnect.shared.infrastructure.database import DocumentStore
from devconnect.shared.utils.logging import bind_user

from .security import SecurityManager

logger = logging.getLogger(__name__)

# Security scheme for OpenAPI documentation; missing header is handled by the resolver
security = HTTPBearer(auto_error=False)


class CurrentUser:
    """User information extracted from the access token."""

    def __init__(self, user_id: str):
        self.user_id = user_id


# =========================================================================
# APPLICATION-SCOPED COLLABORATORS
# =========================================================================

def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> DocumentStore:
    return request.app.state.store


def get_security_manager(request: Request) -> SecurityManager:
    return request.app.state.security


# =========================================================================
# REPOSITORIES
# =========================================================================

def get_user_repository(store: DocumentStore = Depends(get_store)) -> UserRepository:
    return UserRepositoryImpl(store)


def get_profile_repository(store: DocumentStore = Depends(get_store)) -> ProfileRepository:
    return ProfileRepositoryImpl(store)


def get_post_repository(store: DocumentStore = Depends(get_store)) -> PostRepository:
    return PostRepositoryImpl(store)


# =========================================================================
# DOMAIN SERVICES
# =========================================================================

def get_identity_resolver(
    security_manager: SecurityManager = Depends(get_security_manager)
) -> IdentityResolver:
    return IdentityResolver(security_manager.tokens)


def get_auth_service(
    user_repository: UserRepository = Depends(get_user_repository),
    security_manager: SecurityManager = Depends(get_security_manager),
    settings: Settings = Depends(get_app_settings),
) -> AuthService:
    return AuthService(
        user_repository,
        security_manager.credentials,
        security_manager.tokens,
        settings,
    )


def get_profile_service(
    profile_repository: ProfileRepository = Depends(get_profile_repository),
    user_repository: UserRepository = Depends(get_user_repository),
) -> ProfileService:
    return ProfileService(profile_repository, user_repository)


def get_account_service(
    user_repository: UserRepository = Depends(get_user_repository),
    profile_repository: ProfileRepository = Depends(get_profile_repository),
    post_repository: PostRepository = Depends(get_post_repository),
) -> AccountService:
    return AccountService(user_repository, profile_repository, post_repository)


def get_post_service(
    post_repository: PostRepository = Depends(get_post_repository),
    user_repository: UserRepository = Depends(get_user_repository),
) -> PostService:
    return PostService(post_repository, user_repository)


# =========================================================================
# AUTHENTICATION
# =========================================================================

async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    x_auth_token: Optional[str] = Header(default=None, alias="x-auth-token"),
    resolver: IdentityResolver = Depends(get_identity_resolver),
) -> CurrentUser:
    """
    Get current authenticated user from the request headers.

    Accepts ``Authorization: Bearer <token>`` and, for older clients,
    ``x-auth-token: <token>``.

    Raises:
        AuthenticationError: If no valid token is supplied
    """
    token = credentials.credentials if credentials else x_auth_token
    user_id = resolver.resolve(token)

    bind_user(user_id)
    logger.debug(f"Authenticated request for user: {user_id}")
    return CurrentUser(user_id=user_id)

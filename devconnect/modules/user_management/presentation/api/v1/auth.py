# 📄 File: devconnect/modules/user_management/presentation/api/v1/auth.py
# 🧭 Purpose (Layman Explanation):
# The login endpoint and the "who am I" endpoint the web app calls after a page reload.
#
# 🧪 Purpose (Technical Summary):
# FastAPI authentication endpoints: rate-limited credential login issuing a JWT, and a
# token-protected current-user lookup returning public user fields only.
#
# 🔗 Dependencies:
# - FastAPI router, status codes
# - devconnect.shared.core.dependencies (AuthService factory, get_current_user)
# - devconnect.shared.core.rate_limiter (slowapi limiter)
# - auth_schemas (request/response schemas)
#
# 🔄 Connected Modules / Calls From:
# - devconnect.api.v1.router (mounted under /auth)

"""
Authentication API Endpoints

Endpoints:
- POST /: Email/password login with rate limiting
- GET /: Current user information

Security Features:
- Rate limiting on login
- Single error message for unknown email and wrong password
- Authentication audit logging in the service layer
"""

import logging

from fastapi import APIRouter, Depends, Request, status

from devconnect.modules.user_management.domain.services.auth_service import AuthService
from devconnect.modules.user_management.presentation.api.schemas.auth_schemas import (
    LoginRequest,
    TokenResponse,
    UserResponse,
)
from devconnect.shared.core.dependencies import CurrentUser, get_auth_service, get_current_user
from devconnect.shared.core.rate_limiter import auth_rate_limit, limiter

logger = logging.getLogger(__name__)

auth_router = APIRouter()


@auth_router.post(
    "",
    response_model=TokenResponse,
    status_code=status.HTTP_200_OK,
    summary="Log in",
    description="Authenticate with email and password and return an access token",
    responses={
        200: {"description": "Login successful"},
        400: {"description": "Invalid login data"},
        401: {"description": "Invalid credentials"},
        429: {"description": "Too many login attempts"},
    },
)
@limiter.limit(auth_rate_limit)
async def login(
    request: Request,
    login_data: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> TokenResponse:
    """
    Authenticate user with email and password.

    Args:
        request: FastAPI request object for rate limiting
        login_data: Email and password
        auth_service: Injected auth service

    Returns:
        TokenResponse: Access token
    """
    token = await auth_service.login(str(login_data.email), login_data.password)
    return TokenResponse.from_domain(token)


@auth_router.get(
    "",
    response_model=UserResponse,
    summary="Get current user",
    description="Get the authenticated user's public information",
    responses={
        200: {"description": "Current user"},
        401: {"description": "Missing, invalid or expired token"},
        404: {"description": "User no longer exists"},
    },
)
async def get_authenticated_user(
    current_user: CurrentUser = Depends(get_current_user),
    auth_service: AuthService = Depends(get_auth_service),
) -> UserResponse:
    user = await auth_service.get_current_user(current_user.user_id)
    return UserResponse.from_domain(user)

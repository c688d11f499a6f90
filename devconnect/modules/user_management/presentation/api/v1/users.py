# 📄 File: devconnect/modules/user_management/presentation/api/v1/users.py
# 🧭 Purpose (Layman Explanation):
# The sign-up endpoint: a new developer sends their name, email and password and gets
# logged in straight away.
#
# 🧪 Purpose (Technical Summary):
# FastAPI registration endpoint delegating to AuthService.register, rate limited per client
# address and returning a freshly issued access token.
#
# 🔗 Dependencies:
# - FastAPI router, status codes
# - devconnect.shared.core.dependencies (AuthService factory)
# - devconnect.shared.core.rate_limiter (slowapi limiter)
# - auth_schemas (request/response schemas)
#
# 🔄 Connected Modules / Calls From:
# - devconnect.api.v1.router (mounted under /users)

"""
Users API Endpoints

Endpoints:
- POST /: Register a new user and return an access token
"""

import logging

from fastapi import APIRouter, Depends, Request, status

from devconnect.modules.user_management.domain.services.auth_service import AuthService
from devconnect.modules.user_management.presentation.api.schemas.auth_schemas import (
    RegisterRequest,
    TokenResponse,
)
from devconnect.shared.core.dependencies import get_auth_service
from devconnect.shared.core.rate_limiter import auth_rate_limit, limiter

logger = logging.getLogger(__name__)

users_router = APIRouter()


@users_router.post(
    "",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register user",
    description="Create an account with a gravatar avatar and return an access token",
    responses={
        201: {"description": "User registered"},
        400: {"description": "Invalid registration data"},
        409: {"description": "A user with that email already exists"},
        429: {"description": "Too many registration attempts"},
    },
)
@limiter.limit(auth_rate_limit)
async def register_user(
    request: Request,
    registration_data: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> TokenResponse:
    """
    Register a new user.

    Args:
        request: FastAPI request object for rate limiting
        registration_data: Name, email and password
        auth_service: Injected auth service

    Returns:
        TokenResponse: Access token for the new account
    """
    token = await auth_service.register(
        name=registration_data.name,
        email=str(registration_data.email),
        password=registration_data.password,
    )
    return TokenResponse.from_domain(token)

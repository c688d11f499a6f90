# 📄 File: devconnect/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# The traffic director for version 1 of the API: sends account requests to the account
# code and feed requests to the feed code.
# 🧪 Purpose (Technical Summary):
# Main API v1 router aggregation combining module routers under their route prefixes
# plus the health and info endpoints.
# 🔗 Dependencies:
# FastAPI, devconnect.api.v1.health, module presentation routers
# 🔄 Connected Modules / Calls From:
# devconnect.main

import logging

from fastapi import APIRouter

from devconnect.modules.community.presentation.api.v1.posts import posts_router
from devconnect.modules.user_management.presentation.api.v1.auth import auth_router
from devconnect.modules.user_management.presentation.api.v1.profiles import profiles_router
from devconnect.modules.user_management.presentation.api.v1.users import users_router

from . import ROUTE_PREFIXES, get_api_info
from .health import health_router

logger = logging.getLogger(__name__)

# Create main API v1 router
api_v1_router = APIRouter()

# Health check router (no prefix - direct access)
api_v1_router.include_router(health_router, tags=["Health Check"])


@api_v1_router.get("/",
                   summary="API v1 Information",
                   description="Get API v1 version information and route prefixes",
                   tags=["API Info"])
async def api_v1_info() -> dict:
    return get_api_info()


# =========================================================================
# MODULE ROUTER INCLUDES
# =========================================================================

# User management
api_v1_router.include_router(users_router, prefix=ROUTE_PREFIXES["users"], tags=["Users"])
api_v1_router.include_router(auth_router, prefix=ROUTE_PREFIXES["auth"], tags=["Authentication"])
api_v1_router.include_router(profiles_router, prefix=ROUTE_PREFIXES["profile"], tags=["Profiles"])

# Community
api_v1_router.include_router(posts_router, prefix=ROUTE_PREFIXES["posts"], tags=["Posts"])

logger.debug(f"API v1 routers loaded: {', '.join(ROUTE_PREFIXES)}")

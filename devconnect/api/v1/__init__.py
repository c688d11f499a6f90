# 📄 File: devconnect/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups version 1 of the DevConnect web API so a later version can live next to it
# without breaking existing clients.
# 🧪 Purpose (Technical Summary):
# Package initialization for API version 1: version metadata, route prefixes and
# OpenAPI tag descriptions used by the v1 router and the application factory.
# 🔗 Dependencies:
# None
# 🔄 Connected Modules / Calls From:
# devconnect.api.v1.router, devconnect.main

"""
DevConnect API Version 1

Structure:
    v1/
    ├── __init__.py          # This file
    ├── router.py            # Main v1 router aggregation
    └── health.py            # Health check endpoints

Module endpoints live with their modules under
``devconnect/modules/<module>/presentation/api/v1``.
"""

from typing import Any, Dict

__version__ = "1.0.0"
__api_version__ = "v1"

# API v1 route prefixes
ROUTE_PREFIXES = {
    "users": "/users",
    "auth": "/auth",
    "profile": "/profile",
    "posts": "/posts",
}

# API v1 tags for OpenAPI documentation
API_TAGS = [
    {"name": "Users", "description": "Account registration"},
    {"name": "Authentication", "description": "Login and current user"},
    {"name": "Profiles", "description": "Developer profiles, experience and education"},
    {"name": "Posts", "description": "Community posts, likes and comments"},
    {"name": "Health Check", "description": "Service and database status"},
]


def get_api_info() -> Dict[str, Any]:
    """Version information for the v1 info endpoint."""
    return {
        "version": __version__,
        "api_version": __api_version__,
        "routes": dict(ROUTE_PREFIXES),
    }


__all__ = ["API_TAGS", "ROUTE_PREFIXES", "get_api_info"]

# 📄 File: devconnect/shared/core/rate_limiter.py
# 🧭 Purpose (Layman Explanation):
# Stops someone from hammering the sign-up and login pages by capping how often
# one address can try within a minute.
# 🧪 Purpose (Technical Summary):
# Shared slowapi Limiter keyed by client address; enabled per application from settings
# in devconnect.main, with limit strings resolved lazily from settings.
# 🔗 Dependencies:
# slowapi, devconnect.shared.config.settings
# 🔄 Connected Modules / Calls From:
# devconnect.main (state + 429 handler), auth and users endpoints

from slowapi import Limiter
from slowapi.util import get_remote_address

from devconnect.shared.config.settings import get_settings

limiter = Limiter(key_func=get_remote_address)


def auth_rate_limit() -> str:
    """Limit applied to login and registration."""
    return get_settings().AUTH_RATE_LIMIT

# 📄 File: devconnect/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Contains the settings that tell DevConnect where its database lives, how long login
# tokens last, and how chatty the logs should be.
#
# 🧪 Purpose (Technical Summary):
# Configuration package initialization exporting the settings model and its cached factory.
#
# 🔗 Dependencies:
# - settings.py (application settings)
#
# 🔄 Connected Modules / Calls From:
# - devconnect.main (application startup)
# - All modules requiring configuration

"""
Configuration Management Package

Handles environment-based application settings.
"""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]

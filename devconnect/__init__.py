# 📄 File: devconnect/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Tells Python this folder holds the DevConnect application, the backend where developers
# keep a profile, list their jobs and schooling, and share short posts with each other.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version info and package metadata
# for the DevConnect FastAPI application.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - devconnect.main (application entry point)
# - devconnect.api.v1.health (version reporting)

"""
DevConnect - Developer Social Network Backend

Backend API for developer profiles (experience, education, social links)
and a community feed with posts, likes and comments.
"""

__version__ = "1.0.0"
__title__ = "DevConnect API"
__description__ = "Developer profiles and community feed"
__license__ = "MIT"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
    "__license__",
]

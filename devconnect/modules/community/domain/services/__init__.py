# 📄 File: devconnect/modules/community/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# The feed's business rules for posts, likes and comments
# 🧪 Purpose (Technical Summary):
# Domain services package exporting PostService
# 🔗 Dependencies:
# Post models, PostRepository, UserRepository
# 🔄 Connected Modules / Calls From:
# devconnect.shared.core.dependencies, posts API endpoints

from .post_service import PostService

__all__ = ["PostService"]

# 📄 File: devconnect/modules/community/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# The shapes of posts, likes and comments
# 🧪 Purpose (Technical Summary):
# Package initialization for the Post aggregate models
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# post_service.py, repositories, presentation schemas

from .post import Comment, Like, Post

__all__ = ["Post", "Like", "Comment"]

# 📄 File: devconnect/modules/community/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# The storage promises the feed relies on
# 🧪 Purpose (Technical Summary):
# Repository interface for the Post aggregate
# 🔗 Dependencies:
# Domain models, abc
# 🔄 Connected Modules / Calls From:
# post_service.py, account_service.py, post_repository_impl.py

from .post_repository import PostRepository

__all__ = ["PostRepository"]

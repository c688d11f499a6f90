# 📄 File: devconnect/modules/community/__init__.py
# 🧭 Purpose (Layman Explanation):
# The community feed: posts, likes and comments between developers
# 🧪 Purpose (Technical Summary):
# Community bounded context with domain, infrastructure and presentation layers for posts
# 🔗 Dependencies:
# devconnect.shared, devconnect.modules.user_management (user lookups for author snapshots)
# 🔄 Connected Modules / Calls From:
# devconnect.api.v1.router, devconnect.shared.core.dependencies, account deletion

# 📄 File: devconnect/modules/user_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# Everything about a developer's account: signing up, logging in, their profile page,
# and closing the account
# 🧪 Purpose (Technical Summary):
# User management bounded context with domain, infrastructure and presentation layers
# 🔗 Dependencies:
# devconnect.shared (config, core, infrastructure, utils)
# 🔄 Connected Modules / Calls From:
# devconnect.api.v1.router, devconnect.shared.core.dependencies, community module (author lookups)

# 📄 File: devconnect/modules/__init__.py
# 🧭 Purpose (Layman Explanation):
# Holds the feature areas of DevConnect: accounts and profiles, and the community feed
# 🧪 Purpose (Technical Summary):
# Package for bounded-context modules of the modular monolith (user_management, community)
# 🔗 Dependencies:
# Python packaging system
# 🔄 Connected Modules / Calls From:
# devconnect.api.v1.router, devconnect.shared.core.dependencies

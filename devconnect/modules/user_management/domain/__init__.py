# 📄 File: devconnect/modules/user_management/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The rules of the user_management area, independent of databases and web requests
# 🧪 Purpose (Technical Summary):
# Domain layer package: models, repository interfaces and domain services
# 🔗 Dependencies:
# pydantic, devconnect.shared.core
# 🔄 Connected Modules / Calls From:
# Infrastructure and presentation layers of the user_management module

# 📄 File: devconnect/shared/infrastructure/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Groups the plumbing that talks to outside systems, which for DevConnect is the document database.
#
# 🧪 Purpose (Technical Summary):
# Infrastructure package initialization for persistence adapters.
#
# 🔗 Dependencies:
# - database subpackage
#
# 🔄 Connected Modules / Calls From:
# - Module repository implementations, devconnect.main

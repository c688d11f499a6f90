# 📄 File: devconnect/shared/utils/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Small helper tools shared across the app, such as structured logging.
#
# 🧪 Purpose (Technical Summary):
# Utility package initialization for logging helpers.
#
# 🔗 Dependencies:
# - logging.py
#
# 🔄 Connected Modules / Calls From:
# - All application modules

# 📄 File: devconnect/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as a Python package containing common tools that every part
# of DevConnect can use, like settings, security and the database connection.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package initialization for configuration, infrastructure,
# and cross-cutting concerns used throughout the DevConnect modules.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - All application modules importing shared utilities

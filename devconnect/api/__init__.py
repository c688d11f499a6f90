# 📄 File: devconnect/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Marks the api folder as a Python package so the app can load its web routes.
# 🧪 Purpose (Technical Summary):
# Package initialization for the versioned API layer.
# 🔗 Dependencies:
# None (package initialization)
# 🔄 Connected Modules / Calls From:
# devconnect.main

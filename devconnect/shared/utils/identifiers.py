# 📄 File: devconnect/shared/utils/identifiers.py
# 🧭 Purpose (Layman Explanation):
# Makes new record ids and checks whether an id someone sent us even looks like one of ours.
# 🧪 Purpose (Technical Summary):
# ObjectId-based identifier generation and structural ("kind") validation shared by domain
# models, services and the document store.
# 🔗 Dependencies:
# bson (shipped with pymongo)
# 🔄 Connected Modules / Calls From:
# Domain models (nested item ids), domain services (kind checks), DocumentStore

from typing import Any

from bson import ObjectId


def new_object_id() -> str:
    """Generate a fresh 24-hex identifier."""
    return str(ObjectId())


def is_valid_object_id(value: Any) -> bool:
    """Structural kind check: a 24 character hex ObjectId string."""
    return isinstance(value, str) and ObjectId.is_valid(value)

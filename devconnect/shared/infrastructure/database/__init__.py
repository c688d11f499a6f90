# 📄 File: devconnect/shared/infrastructure/database/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Bundles the database pieces: the list of allowed storage operations and the MongoDB
# code that performs them.
#
# 🧪 Purpose (Technical Summary):
# Database package exporting the DocumentStore interface, sort constants and the
# MongoDB implementation.
#
# 🔗 Dependencies:
# - document_store.py, mongo_store.py
#
# 🔄 Connected Modules / Calls From:
# - Repository implementations, devconnect.main, devconnect.shared.core.dependencies

from .document_store import ASCENDING, DESCENDING, Document, DocumentStore, Filter
from .mongo_store import MongoDocumentStore

__all__ = [
    "ASCENDING",
    "DESCENDING",
    "Document",
    "DocumentStore",
    "Filter",
    "MongoDocumentStore",
]

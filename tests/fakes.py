# 📄 File: tests/fakes.py
# 🧭 Purpose (Layman Explanation):
# A pretend database that lives in memory so tests run fast without a real MongoDB.
# 🧪 Purpose (Technical Summary):
# In-memory DocumentStore implementation with the same filter, dotted-key upsert, sort and
# copy semantics as MongoDocumentStore, plus a per-collection failure switch for testing
# partial account deletion.
# 🔗 Dependencies:
# devconnect.shared.infrastructure.database, devconnect.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# tests/conftest.py and every service or API test

from copy import deepcopy
from typing import Any, Dict, List, Optional, Set

from devconnect.shared.core.exceptions import ConflictError, DatabaseError
from devconnect.shared.infrastructure.database import Document, DocumentStore, Filter

UNIQUE_FIELDS = {"users": "email", "profiles": "user"}


class InMemoryDocumentStore(DocumentStore):
    """Dict-backed document store for tests."""

    def __init__(self):
        self.collections: Dict[str, Dict[str, Document]] = {}
        self.connected = False
        self.failing_collections: Set[str] = set()

    async def connect(self) -> None:
        self.connected = True

    async def close(self) -> None:
        self.connected = False

    async def ping(self) -> bool:
        return True

    # =========================================================================
    # READS
    # =========================================================================

    async def find_one(self, collection: str, filter: Filter) -> Optional[Document]:
        for document in self._matching(collection, filter):
            return deepcopy(document)
        return None

    async def find(self, collection: str, filter: Optional[Filter] = None, sort=None) -> List[Document]:
        documents = [deepcopy(d) for d in self._matching(collection, filter or {})]
        for key, direction in reversed(list(sort or [])):
            documents.sort(key=lambda d: d.get(key), reverse=direction < 0)
        return documents

    # =========================================================================
    # WRITES
    # =========================================================================

    async def insert(self, collection: str, document: Document) -> Document:
        self._check_available(collection, "insert")
        stored = deepcopy(document)
        stored["id"] = stored.get("id") or self.new_id()
        self._check_unique(collection, stored)
        self._collection(collection)[stored["id"]] = stored
        return deepcopy(stored)

    async def upsert(self, collection: str, filter: Filter, fields: Document,
                     on_insert: Optional[Document] = None) -> Document:
        self._check_available(collection, "upsert")
        existing = next(iter(self._matching(collection, filter)), None)

        if existing is None:
            existing = {k: v for k, v in filter.items() if k != "id"}
            existing["id"] = self.new_id()
            for key, value in (on_insert or {}).items():
                _set_path(existing, key, deepcopy(value))
            self._collection(collection)[existing["id"]] = existing

        for key, value in fields.items():
            _set_path(existing, key, deepcopy(value))
        return deepcopy(existing)

    async def replace(self, collection: str, document_id: str, document: Document) -> Optional[Document]:
        self._check_available(collection, "replace")
        documents = self._collection(collection)
        if document_id not in documents:
            return None
        stored = deepcopy(document)
        stored["id"] = document_id
        documents[document_id] = stored
        return deepcopy(stored)

    async def delete_one(self, collection: str, filter: Filter) -> int:
        self._check_available(collection, "delete_one")
        for document in self._matching(collection, filter):
            del self._collection(collection)[document["id"]]
            return 1
        return 0

    async def delete_many(self, collection: str, filter: Filter) -> int:
        self._check_available(collection, "delete_many")
        matched = list(self._matching(collection, filter))
        for document in matched:
            del self._collection(collection)[document["id"]]
        return len(matched)

    # =========================================================================
    # HELPERS
    # =========================================================================

    def count(self, collection: str) -> int:
        return len(self._collection(collection))

    def _collection(self, name: str) -> Dict[str, Document]:
        return self.collections.setdefault(name, {})

    def _matching(self, collection: str, filter: Filter) -> List[Document]:
        return [d for d in self._collection(collection).values() if _matches(d, filter)]

    def _check_available(self, collection: str, operation: str) -> None:
        if collection in self.failing_collections:
            raise DatabaseError(operation=operation, collection=collection)

    def _check_unique(self, collection: str, document: Document) -> None:
        field = UNIQUE_FIELDS.get(collection)
        if field is None:
            return
        for other in self._collection(collection).values():
            if other["id"] != document["id"] and other.get(field) == document.get(field):
                raise ConflictError("Resource already exists", resource_type=collection,
                                    conflict_field=field)


def _matches(document: Document, filter: Filter) -> bool:
    for key, expected in filter.items():
        actual = document.get(key)
        if isinstance(expected, dict) and "$in" in expected:
            if actual not in expected["$in"]:
                return False
        elif actual != expected:
            return False
    return True


def _set_path(document: Dict[str, Any], dotted_key: str, value: Any) -> None:
    *parents, leaf = dotted_key.split(".")
    target = document
    for part in parents:
        if not isinstance(target.get(part), dict):
            target[part] = {}
        target = target[part]
    target[leaf] = value

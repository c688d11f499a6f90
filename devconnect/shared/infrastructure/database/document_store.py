# 📄 File: devconnect/shared/infrastructure/database/document_store.py
#
# 🧭 Purpose (Layman Explanation):
# Describes, in one place, every way the app is allowed to read and write its stored records,
# so the rest of the code never needs to know which database sits underneath.
#
# 🧪 Purpose (Technical Summary):
# Abstract async document store interface (find/insert/upsert/replace/delete by filter)
# plus identifier helpers. Documents are plain dicts whose primary key is the "id" string.
#
# 🔗 Dependencies:
# - abc (interface definition)
# - devconnect.shared.utils.identifiers (ObjectId generation and kind check)
#
# 🔄 Connected Modules / Calls From:
# - devconnect.shared.infrastructure.database.mongo_store (MongoDB implementation)
# - Module repository implementations (user, profile, post)
# - tests.fakes (in-memory implementation for tests)

"""
Document Store Interface

Filters are equality maps. The key ``id`` addresses the document id and
may be given ``{"$in": [...]}`` to match a list of ids. Keys in ``upsert``
field maps may be dotted (``social.youtube``) to address nested fields.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence, Tuple

from devconnect.shared.core.exceptions import InvalidIdentifierError
from devconnect.shared.utils.identifiers import is_valid_object_id, new_object_id

Document = Dict[str, Any]
Filter = Dict[str, Any]
SortSpec = Sequence[Tuple[str, int]]

ASCENDING = 1
DESCENDING = -1


class DocumentStore(ABC):
    """
    Abstract document store.

    Implementations must return copies: mutating a returned document
    never changes stored state until it is written back.
    """

    # =========================================================================
    # IDENTIFIERS
    # =========================================================================

    @staticmethod
    def new_id() -> str:
        """Generate a fresh document or nested-item identifier."""
        return new_object_id()

    @staticmethod
    def is_valid_id(value: Any) -> bool:
        """Structural kind check: a 24 character hex ObjectId string."""
        return is_valid_object_id(value)

    @classmethod
    def require_valid_id(cls, value: Any, resource_type: Optional[str] = None) -> str:
        """
        Return ``value`` unchanged when it passes the kind check.

        Raises:
            InvalidIdentifierError: If value is not a structurally valid id
        """
        if not cls.is_valid_id(value):
            raise InvalidIdentifierError(value, resource_type=resource_type)
        return value

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    @abstractmethod
    async def connect(self) -> None:
        """Open connections and prepare indexes."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release connections."""
        pass

    @abstractmethod
    async def ping(self) -> bool:
        """Return True when the backing store answers."""
        pass

    # =========================================================================
    # READS
    # =========================================================================

    @abstractmethod
    async def find_one(self, collection: str, filter: Filter) -> Optional[Document]:
        """Return the first document matching ``filter`` or None."""
        pass

    async def find_by_id(self, collection: str, document_id: str) -> Optional[Document]:
        """
        Return the document with ``document_id`` or None.

        Raises:
            InvalidIdentifierError: If document_id fails the kind check
        """
        self.require_valid_id(document_id, resource_type=collection)
        return await self.find_one(collection, {"id": document_id})

    @abstractmethod
    async def find(
        self,
        collection: str,
        filter: Optional[Filter] = None,
        sort: Optional[SortSpec] = None
    ) -> List[Document]:
        """Return all documents matching ``filter`` in ``sort`` order."""
        pass

    # =========================================================================
    # WRITES
    # =========================================================================

    @abstractmethod
    async def insert(self, collection: str, document: Document) -> Document:
        """
        Insert a document and return it with its assigned ``id``.

        Raises:
            ConflictError: If a unique index rejects the document
        """
        pass

    @abstractmethod
    async def upsert(
        self,
        collection: str,
        filter: Filter,
        fields: Document,
        on_insert: Optional[Document] = None
    ) -> Document:
        """
        Atomically update the document matching ``filter`` or create it.

        ``fields`` are set in both cases. ``on_insert`` fields are only
        written when a new document is created; equality fields from the
        filter are copied into a newly created document.

        Returns:
            The resulting document
        """
        pass

    @abstractmethod
    async def replace(self, collection: str, document_id: str, document: Document) -> Optional[Document]:
        """Replace the whole document; returns None when it no longer exists."""
        pass

    @abstractmethod
    async def delete_one(self, collection: str, filter: Filter) -> int:
        """Delete the first matching document; returns the number deleted."""
        pass

    @abstractmethod
    async def delete_many(self, collection: str, filter: Filter) -> int:
        """Delete every matching document; returns the number deleted."""
        pass

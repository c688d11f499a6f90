# 📄 File: devconnect/shared/infrastructure/database/mongo_store.py
#
# 🧭 Purpose (Layman Explanation):
# Manages the connection to our MongoDB database and translates the app's simple
# "find / save / delete" requests into real database calls.
#
# 🧪 Purpose (Technical Summary):
# DocumentStore implementation on pymongo's asyncio client with explicit lifecycle
# (connect/close), unique index setup, ObjectId <-> "id" mapping, atomic upserts,
# and translation of driver errors into the application exception hierarchy.
#
# 🔗 Dependencies:
# - pymongo (AsyncMongoClient, ReturnDocument, driver errors)
# - bson (ObjectId)
# - devconnect.shared.infrastructure.database.document_store (interface)
# - devconnect.shared.core.exceptions (DatabaseError, ConflictError)
#
# 🔄 Connected Modules / Calls From:
# - devconnect.main (lifespan startup/shutdown)
# - devconnect.shared.core.dependencies (store dependency)
# - devconnect.api.v1.health (ping)

import logging
from typing import Any, Dict, List, Optional, Tuple

from bson import ObjectId
from pymongo import ASCENDING as MONGO_ASC
from pymongo import AsyncMongoClient, ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from devconnect.shared.core.exceptions import ConflictError, DatabaseError
from .document_store import Document, DocumentStore, Filter, SortSpec

logger = logging.getLogger(__name__)

# (collection, field, unique)
INDEXES: List[Tuple[str, str, bool]] = [
    ("users", "email", True),
    ("profiles", "user", True),
    ("posts", "user", False),
    ("posts", "created_at", False),
]


class MongoDocumentStore(DocumentStore):
    """
    MongoDB-backed document store.

    The client is created by ``connect()`` and released by ``close()``;
    nothing connects implicitly on first use.
    """

    def __init__(
        self,
        url: str,
        database: str,
        server_selection_timeout_ms: int = 5000
    ):
        self._url = url
        self._database_name = database
        self._server_selection_timeout_ms = server_selection_timeout_ms
        self._client: Optional[AsyncMongoClient] = None
        self._db = None

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    async def connect(self) -> None:
        """Create the client, verify connectivity and ensure indexes."""
        if self._client is not None:
            logger.warning("MongoDB client already initialized")
            return

        logger.info(f"Connecting to MongoDB database '{self._database_name}'...")
        self._client = AsyncMongoClient(
            self._url,
            tz_aware=True,
            serverSelectionTimeoutMS=self._server_selection_timeout_ms,
        )
        self._db = self._client[self._database_name]

        try:
            await self._db.command("ping")
            for collection, field, unique in INDEXES:
                await self._db[collection].create_index([(field, MONGO_ASC)], unique=unique)
        except PyMongoError as e:
            logger.error(f"Failed to initialize MongoDB connection: {e}")
            await self.close()
            raise DatabaseError("Could not connect to database", operation="connect") from e

        logger.info("MongoDB connection initialized successfully")

    async def close(self) -> None:
        if self._client is None:
            return
        await self._client.close()
        self._client = None
        self._db = None
        logger.info("MongoDB connection closed")

    async def ping(self) -> bool:
        if self._db is None:
            return False
        try:
            await self._db.command("ping")
            return True
        except PyMongoError as e:
            logger.warning(f"MongoDB health check failed: {e}")
            return False

    # =========================================================================
    # READS
    # =========================================================================

    async def find_one(self, collection: str, filter: Filter) -> Optional[Document]:
        try:
            raw = await self._collection(collection).find_one(self._to_query(filter))
        except PyMongoError as e:
            raise self._wrap(e, "find_one", collection)
        return self._from_mongo(raw)

    async def find(
        self,
        collection: str,
        filter: Optional[Filter] = None,
        sort: Optional[SortSpec] = None
    ) -> List[Document]:
        try:
            cursor = self._collection(collection).find(self._to_query(filter or {}))
            if sort:
                cursor = cursor.sort([(self._to_key(key), direction) for key, direction in sort])
            raw_documents = await cursor.to_list()
        except PyMongoError as e:
            raise self._wrap(e, "find", collection)
        return [self._from_mongo(raw) for raw in raw_documents]

    # =========================================================================
    # WRITES
    # =========================================================================

    async def insert(self, collection: str, document: Document) -> Document:
        payload = self._to_mongo(document)
        try:
            result = await self._collection(collection).insert_one(payload)
        except DuplicateKeyError as e:
            raise self._conflict(e, collection)
        except PyMongoError as e:
            raise self._wrap(e, "insert", collection)

        created = dict(document)
        created["id"] = str(result.inserted_id)
        return created

    async def upsert(
        self,
        collection: str,
        filter: Filter,
        fields: Document,
        on_insert: Optional[Document] = None
    ) -> Document:
        update: Dict[str, Any] = {}
        if fields:
            update["$set"] = fields
        if on_insert:
            update["$setOnInsert"] = on_insert

        query = self._to_query(filter)

        # Two first-time upserts racing on a unique key: the loser retries and matches
        for attempt in range(2):
            try:
                raw = await self._collection(collection).find_one_and_update(
                    query,
                    update,
                    upsert=True,
                    return_document=ReturnDocument.AFTER,
                )
                return self._from_mongo(raw)
            except DuplicateKeyError as e:
                if attempt == 1:
                    raise self._conflict(e, collection)
                logger.debug(f"Upsert on {collection} lost a race, retrying")
            except PyMongoError as e:
                raise self._wrap(e, "upsert", collection)

    async def replace(self, collection: str, document_id: str, document: Document) -> Optional[Document]:
        payload = self._to_mongo(document)
        payload.pop("_id", None)
        try:
            result = await self._collection(collection).replace_one(
                {"_id": ObjectId(document_id)}, payload
            )
        except DuplicateKeyError as e:
            raise self._conflict(e, collection)
        except PyMongoError as e:
            raise self._wrap(e, "replace", collection)

        if result.matched_count == 0:
            return None
        replaced = dict(document)
        replaced["id"] = document_id
        return replaced

    async def delete_one(self, collection: str, filter: Filter) -> int:
        try:
            result = await self._collection(collection).delete_one(self._to_query(filter))
        except PyMongoError as e:
            raise self._wrap(e, "delete_one", collection)
        return result.deleted_count

    async def delete_many(self, collection: str, filter: Filter) -> int:
        try:
            result = await self._collection(collection).delete_many(self._to_query(filter))
        except PyMongoError as e:
            raise self._wrap(e, "delete_many", collection)
        return result.deleted_count

    # =========================================================================
    # TRANSLATION HELPERS
    # =========================================================================

    def _collection(self, name: str):
        if self._db is None:
            raise DatabaseError("Database not initialized", collection=name)
        return self._db[name]

    @staticmethod
    def _to_key(key: str) -> str:
        return "_id" if key == "id" else key

    def _to_query(self, filter: Filter) -> Dict[str, Any]:
        query: Dict[str, Any] = {}
        for key, value in filter.items():
            if key != "id":
                query[key] = value
            elif isinstance(value, dict) and "$in" in value:
                query["_id"] = {"$in": [ObjectId(v) for v in value["$in"] if ObjectId.is_valid(v)]}
            else:
                query["_id"] = ObjectId(value)
        return query

    @staticmethod
    def _to_mongo(document: Document) -> Dict[str, Any]:
        payload = {k: v for k, v in document.items() if k != "id"}
        if document.get("id"):
            payload["_id"] = ObjectId(document["id"])
        return payload

    @staticmethod
    def _from_mongo(raw: Optional[Dict[str, Any]]) -> Optional[Document]:
        if raw is None:
            return None
        document = {k: v for k, v in raw.items() if k != "_id"}
        document["id"] = str(raw["_id"])
        return document

    @staticmethod
    def _wrap(error: PyMongoError, operation: str, collection: str) -> DatabaseError:
        logger.error(f"MongoDB {operation} on {collection} failed: {error}")
        return DatabaseError(operation=operation, collection=collection)

    @staticmethod
    def _conflict(error: DuplicateKeyError, collection: str) -> ConflictError:
        key_value = (error.details or {}).get("keyValue") or {}
        field = next(iter(key_value), None)
        logger.warning(f"Unique index rejected write on {collection}: {field}")
        return ConflictError(
            "Resource already exists",
            resource_type=collection,
            conflict_field=field,
        )

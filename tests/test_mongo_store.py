# 📄 File: tests/test_mongo_store.py
# 🧭 Purpose (Layman Explanation):
# Checks how the MongoDB store translates the app's records and lookups into MongoDB's own
# format, without needing a running database.
# 🧪 Purpose (Technical Summary):
# MongoDocumentStore translation helper tests: "id" <-> "_id" ObjectId mapping, "$in" id
# filters, sort key mapping, and behaviour before connect().
# 🔗 Dependencies:
# pytest, pytest-asyncio, bson
# 🔄 Connected Modules / Calls From:
# pytest

import pytest
from bson import ObjectId

from devconnect.shared.core.exceptions import DatabaseError
from devconnect.shared.infrastructure.database import MongoDocumentStore

USER_ID = "64b7f0c2a1b2c3d4e5f60701"
OTHER_ID = "64b7f0c2a1b2c3d4e5f60702"


@pytest.fixture
def mongo_store():
    return MongoDocumentStore("mongodb://localhost:27017", "devconnect_test")


def test_query_maps_id_to_object_id(mongo_store):
    query = mongo_store._to_query({"id": USER_ID, "user": OTHER_ID})

    assert query == {"_id": ObjectId(USER_ID), "user": OTHER_ID}


def test_query_in_filter_drops_malformed_ids(mongo_store):
    query = mongo_store._to_query({"id": {"$in": [USER_ID, "nope", OTHER_ID]}})

    assert query == {"_id": {"$in": [ObjectId(USER_ID), ObjectId(OTHER_ID)]}}


def test_sort_key_for_id():
    assert MongoDocumentStore._to_key("id") == "_id"
    assert MongoDocumentStore._to_key("created_at") == "created_at"


def test_document_to_mongo_and_back():
    document = {"id": USER_ID, "name": "Alice", "social": {"twitter": "t"}}

    payload = MongoDocumentStore._to_mongo(document)
    assert payload == {"_id": ObjectId(USER_ID), "name": "Alice", "social": {"twitter": "t"}}

    assert MongoDocumentStore._from_mongo(payload) == document


def test_new_document_has_no_id():
    assert MongoDocumentStore._to_mongo({"name": "Alice"}) == {"name": "Alice"}
    assert MongoDocumentStore._from_mongo(None) is None


async def test_unconnected_store(mongo_store):
    assert await mongo_store.ping() is False

    with pytest.raises(DatabaseError):
        await mongo_store.find_one("users", {"email": "alice@example.com"})

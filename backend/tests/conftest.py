"""
ReliefHub Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── store: InMemoryStore, a DocumentStore backed by Python lists
    ├── users / supplies: collections from that store
    ├── token_issuer: TokenIssuer with the test secret
    └── test_client: HTTPX AsyncClient talking to create_app(store=store)

InMemoryStore answers the subset of the async pymongo collection API the
services use (find/to_list, find_one, insert_one, update_one, delete_one,
create_index) and returns real pymongo result objects, so serializers and
routes run unchanged.
"""

import copy
import os

# Override settings for testing BEFORE any app imports
os.environ["JWT_SECRET"] = "test-secret"
os.environ["EXPIRES_IN"] = "1h"
os.environ["BCRYPT_ROUNDS"] = "4"  # Minimum work factor keeps hashing fast
os.environ["MONGODB_URI"] = "mongodb://localhost:27017"
os.environ["LOG_LEVEL"] = "WARNING"

from typing import Any, Dict, List, Optional

import pytest
import pytest_asyncio
from bson import ObjectId
from httpx import ASGITransport, AsyncClient
from pymongo.errors import DuplicateKeyError
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from reliefhub.database import DocumentStore
from reliefhub.services.token_service import TokenIssuer

TEST_SECRET = "test-secret"


# ══════════════════════════════════════════════════════════════════════════
# In-Memory Document Store
# ══════════════════════════════════════════════════════════════════════════

def _matches(document: Dict[str, Any], query: Dict[str, Any]) -> bool:
    return all(key in document and document[key] == value for key, value in query.items())


class InMemoryCursor:
    def __init__(self, documents: List[Dict[str, Any]]):
        self._documents = documents

    async def to_list(self, length: Optional[int] = None) -> List[Dict[str, Any]]:
        if length is None:
            return list(self._documents)
        return self._documents[:length]


class InMemoryCollection:
    def __init__(self, name: str):
        self.name = name
        self.documents: List[Dict[str, Any]] = []
        self.unique_fields = set()

    async def create_index(self, key: str, unique: bool = False, **kwargs) -> str:
        if unique:
            self.unique_fields.add(key)
        return f"{key}_1"

    def find(self, query: Optional[Dict[str, Any]] = None) -> InMemoryCursor:
        query = query or {}
        return InMemoryCursor(
            [copy.deepcopy(doc) for doc in self.documents if _matches(doc, query)]
        )

    async def find_one(self, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        for doc in self.documents:
            if _matches(doc, query):
                return copy.deepcopy(doc)
        return None

    async def insert_one(self, document: Dict[str, Any]) -> InsertOneResult:
        for field in self.unique_fields:
            if field in document and any(doc.get(field) == document[field] for doc in self.documents):
                raise DuplicateKeyError(
                    f"E11000 duplicate key error collection: {self.name} index: {field}_1",
                    11000,
                )
        document.setdefault("_id", ObjectId())
        self.documents.append(copy.deepcopy(document))
        return InsertOneResult(document["_id"], True)

    async def update_one(self, query: Dict[str, Any], update: Dict[str, Any]) -> UpdateResult:
        changes = update.get("$set", {})
        for doc in self.documents:
            if _matches(doc, query):
                modified = any(key not in doc or doc[key] != value for key, value in changes.items())
                doc.update(changes)
                return UpdateResult({"n": 1, "nModified": int(modified)}, True)
        return UpdateResult({"n": 0, "nModified": 0}, True)

    async def delete_one(self, query: Dict[str, Any]) -> DeleteResult:
        for index, doc in enumerate(self.documents):
            if _matches(doc, query):
                del self.documents[index]
                return DeleteResult({"n": 1}, True)
        return DeleteResult({"n": 0}, True)


class InMemoryDatabase(dict):
    def __missing__(self, name: str) -> InMemoryCollection:
        collection = InMemoryCollection(name)
        self[name] = collection
        return collection


class InMemoryStore(DocumentStore):
    """DocumentStore whose connect() opens an in-memory database."""

    def __init__(self):
        super().__init__()
        self.database = InMemoryDatabase()

    async def connect(self) -> None:
        self._db = self.database
        await self.ensure_indexes()

    async def disconnect(self) -> None:
        self._db = None


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures (created fresh for each test)
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def store():
    """A connected in-memory store with the users.email unique index."""
    in_memory = InMemoryStore()
    await in_memory.connect()
    yield in_memory
    await in_memory.disconnect()


@pytest.fixture
def users(store):
    return store.collection("users")


@pytest.fixture
def supplies(store):
    return store.collection("supplies")


@pytest.fixture
def token_issuer():
    return TokenIssuer(secret=TEST_SECRET, ttl_seconds=3600)


@pytest.fixture
def sample_supply():
    return {
        "img": "https://example.org/blankets.jpg",
        "title": "Winter blankets",
        "category": "Clothing",
        "price": 25,
        "description": "Wool blankets for shelters",
    }


@pytest_asyncio.fixture
async def test_client(store):
    """
    HTTPX AsyncClient routed straight into the app through ASGITransport.

    raise_app_exceptions=False lets tests observe the 500 responses the
    catch-all handler produces instead of the re-raised exception.
    """
    from reliefhub.main import create_app

    app = create_app(store=store)
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

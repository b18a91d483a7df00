"""
ReliefHub Backend — Document Store
====================================

What:  Owns the single async MongoDB client and hands out collections.
How:   DocumentStore wraps pymongo's AsyncMongoClient. The app factory
       creates one instance, the lifespan calls connect()/disconnect(),
       and route dependencies pull it from ``app.state.store``.
Who:   Services receive collections from it through FastAPI dependencies.
When:  Connected at startup, closed at shutdown; one client per process.

Collections:
    users        registered accounts (unique index on email)
    supplies     relief supply listings
    donors       donor records
    communities  community posts
    volunteers   volunteer sign-ups
"""

import logging
from typing import Any, Optional

from fastapi import Request
from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

from reliefhub.config import Settings, settings as default_settings
from reliefhub.exceptions import DatabaseError

logger = logging.getLogger(__name__)

# ── Collection Names ──────────────────────────────────────────────────────
USERS = "users"
SUPPLIES = "supplies"
DONORS = "donors"
COMMUNITIES = "communities"
VOLUNTEERS = "volunteers"


class DocumentStore:
    """
    Explicitly owned connection to the document database.

    Lifecycle:
        store = DocumentStore(settings)
        await store.connect()       # ping + ensure indexes
        users = store.collection(USERS)
        await store.disconnect()

    collection() raises DatabaseError when called before connect() or
    after disconnect(), so a handler never talks to a closed client.
    """

    def __init__(self, config: Optional[Settings] = None):
        self._settings = config or default_settings
        self._client: Optional[AsyncMongoClient] = None
        self._db: Any = None

    @property
    def is_connected(self) -> bool:
        return self._db is not None

    async def connect(self) -> None:
        """
        Open the client, verify the server answers, and create indexes.

        Raises:
            DatabaseError: The server could not be reached or the unique email
                index could not be built.
        """
        if self._client is not None:
            return

        client: AsyncMongoClient = AsyncMongoClient(self._settings.mongodb_uri)
        self._client = client
        self._db = client[self._settings.database_name]
        try:
            await client.admin.command("ping")
            await self.ensure_indexes()
        except PyMongoError as e:
            await client.close()
            self._client = None
            self._db = None
            logger.error("Could not connect to MongoDB: %s", e)
            raise DatabaseError(
                message="Could not connect to the document store",
                context={"original_error": type(e).__name__},
            ) from e

        logger.info("Connected to MongoDB (database=%s)", self._settings.database_name)

    async def ensure_indexes(self) -> None:
        """Registration relies on this index to reject duplicate emails atomically."""
        await self.collection(USERS).create_index("email", unique=True)

    def collection(self, name: str) -> Any:
        if self._db is None:
            raise DatabaseError(
                message="The document store is not connected",
                context={"collection": name},
            )
        return self._db[name]

    async def disconnect(self) -> None:
        if self._client is None:
            return
        await self._client.close()
        self._client = None
        self._db = None
        logger.info("MongoDB connection closed")


# ── Store Dependency ──────────────────────────────────────────────────────
def get_store(request: Request) -> DocumentStore:
    """FastAPI dependency returning the store owned by the running app."""
    return request.app.state.store

"""
LinkHub Backend — Document Store
==================================

What:  MongoDB access for the whole application: one `DocumentStore` wrapping
       an async motor client, plus the FastAPI dependency that hands it to routes.
Why:   Centralizes all database connection logic in one place.
How:   The store is constructed explicitly during bootstrap (lifespan in
       main.py, or a test fixture) and attached to `app.state.store`.
       Nothing in this module holds a connection at import time.
Who:   Services receive the store as an argument; routes obtain it via
       `Depends(get_store)`.

Connection Pooling:
    Pooling and per-operation timeouts are owned by the motor client. This
    layer adds no locking or retries; each insert/update/delete is atomic at
    the single-document level only, as MongoDB provides.
"""

import logging
from typing import Any

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient

from linkhub.config import Settings

logger = logging.getLogger(__name__)


class Collections:
    """Names of the four collections the API serves."""

    USERS = "users"
    CONNECTIONS = "connections"
    POSTS = "posts"
    MESSAGES = "messages"


class DocumentStore:
    """
    Handle on one MongoDB database.

    Args:
        client: An AsyncIOMotorClient, or any client exposing the same
                `client[db][collection]` interface (tests use mongomock-motor).
        database_name: Database holding the four collections.
    """

    def __init__(self, client: Any, database_name: str):
        self._client = client
        self._database = client[database_name]
        self.database_name = database_name

    @classmethod
    def from_settings(cls, config: Settings) -> "DocumentStore":
        """Build a store from application settings. Does not contact the server."""
        client = AsyncIOMotorClient(
            config.mongo_url,
            serverSelectionTimeoutMS=config.mongo_server_selection_timeout_ms,
            tz_aware=True,
        )
        return cls(client, config.mongo_db_name)

    def collection(self, name: str) -> Any:
        return self._database[name]

    async def ping(self) -> None:
        """
        Round-trip to the server.

        Raises:
            Any driver error (e.g. ServerSelectionTimeoutError) when the
            server is unreachable.
        """
        await self._client.admin.command("ping")

    def close(self) -> None:
        """Close all pooled connections."""
        self._client.close()
        logger.info("MongoDB client closed")


def get_store(request: Request) -> DocumentStore:
    """
    FastAPI dependency returning the store attached to the running app.

    Example usage in a route:
        @router.get("/users")
        async def list_users(store: DocumentStore = Depends(get_store)):
            ...
    """
    return request.app.state.store

"""
LinkHub Backend — Connection Service
======================================

Storage operations behind the /connections endpoints.

Listing is one-directional: a user's connections are the documents where
they are `user1`. Documents where they appear as `user2` are not returned.
"""

from typing import List, Optional

from linkhub import queries
from linkhub.database import Collections, DocumentStore
from linkhub.schemas.common import DeleteResult, Document, InsertResult, UpdateResult
from linkhub.services.collection_service import CollectionService

CONNECTION_ID = "connectionId"
CONNECTED = "connected"


class ConnectionService(CollectionService):
    collection_name = Collections.CONNECTIONS
    resource = "connection"

    async def list_connections(self, store: DocumentStore, user_id: str) -> List[Document]:
        return await self.find_many(store, queries.match("user1", user_id), subject="connections")

    async def send_request(self, store: DocumentStore, document: Optional[Document]) -> InsertResult:
        return await self.insert_one(
            store, dict(document or {}), action="sending", subject="connection request"
        )

    async def accept_request(self, store: DocumentStore, connection_id: str) -> UpdateResult:
        return await self.update_one(
            store,
            queries.match(CONNECTION_ID, connection_id),
            queries.set_fields(status=CONNECTED),
            action="accepting",
            subject="connection request",
        )

    async def remove_connection(self, store: DocumentStore, connection_id: str) -> DeleteResult:
        return await self.delete_one(
            store,
            queries.match(CONNECTION_ID, connection_id),
            action="removing",
            subject="connection",
        )


connection_service = ConnectionService()

"""
LinkHub Backend — Message Service
===================================

What:  Storage operations behind the /messages endpoints.

Identifier:
    Messages have no application-level id; deletion goes through MongoDB's
    _id, parsed from the path with queries.parse_object_id().

Malformed ids:
    A path segment that is not a valid ObjectId is NOT a client error here.
    The delete runs with a filter that matches nothing and returns
    deletedCount 0 with HTTP 200, the same answer as a well-formed id that
    no longer exists.
"""

import logging
from datetime import datetime
from typing import Callable, List, Optional

from linkhub import queries
from linkhub.database import Collections, DocumentStore
from linkhub.schemas.common import DeleteResult, Document, InsertResult
from linkhub.services.collection_service import CollectionService, utcnow

logger = logging.getLogger(__name__)


class MessageService(CollectionService):
    collection_name = Collections.MESSAGES
    resource = "message"

    def __init__(self, clock: Callable[[], datetime] = utcnow):
        self._clock = clock

    async def list_messages(self, store: DocumentStore, recipient_id: str) -> List[Document]:
        """Messages addressed to the user (filter on `to`)."""
        return await self.find_many(store, queries.match("to", recipient_id), subject="messages")

    async def send_message(self, store: DocumentStore, document: Optional[Document]) -> InsertResult:
        """Insert the body as-is, with `sendAt` set from the server clock."""
        message = dict(document or {})
        message["sendAt"] = self._clock()
        return await self.insert_one(store, message, action="sending", subject="message")

    async def delete_message(self, store: DocumentStore, message_id: str) -> DeleteResult:
        parsed = queries.parse_object_id(message_id)
        if not parsed.is_valid:
            logger.info("Malformed message id %r; delete will match nothing", message_id)
        return await self.delete_one(store, parsed.as_filter(), subject="message")


message_service = MessageService()

"""
LinkHub Backend — Collection Service (Shared Storage Operations)
=================================================================

What:  Base class wrapping the five storage operations every resource uses:
       find-many, find-one, insert-one, update-one, delete-one.
Why:   Every endpoint performs exactly one of these calls and translates
       failures the same way. Writing that boundary once means the resource
       services only say WHICH collection, WHICH query, and WHAT to call the
       action in an error message.
How:   Each operation runs its single driver call inside `_storage_call`,
       which re-raises any driver exception as StorageError. The exception
       handler in main.py logs it once, with the traceback.

Error Handling Strategy:
    NotFoundError  → raised by find_one when the lookup returns None
    StorageError   → any exception raised by the driver
    (nothing else) → zero-affected writes return the acknowledgement unchanged

    No retries: a failed call fails the request.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, AsyncIterator, List, Optional

from linkhub.database import DocumentStore
from linkhub.exceptions import LinkHubError, NotFoundError, StorageError
from linkhub.queries import Query
from linkhub.schemas.common import (
    DeleteResult,
    Document,
    InsertResult,
    UpdateResult,
    encode_document,
    encode_documents,
)

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    """Server clock used for createdAt / sendAt."""
    return datetime.now(timezone.utc)


class CollectionService:
    """
    Storage operations scoped to one collection.

    Subclasses set:
        collection_name: MongoDB collection the service reads and writes
        resource:        Singular label used in not-found messages ("user")
    """

    collection_name: str = ""
    resource: str = "resource"

    @asynccontextmanager
    async def _storage_call(
        self,
        action: str,
        subject: str,
        expose_reason: bool = False,
    ) -> AsyncIterator[None]:
        """
        Failure boundary around one driver call.

        Args:
            action:  Verb for the message ("fetching", "liking")
            subject: What was being acted on ("users", "connection request")
            expose_reason: Return the driver's error text to the client
        """
        try:
            yield
        except LinkHubError:
            raise
        except Exception as e:
            raise StorageError(
                action=action,
                resource=subject,
                reason=str(e),
                expose_reason=expose_reason,
                context={"collection": self.collection_name, "error_type": type(e).__name__},
            ) from e

    def _collection(self, store: DocumentStore) -> Any:
        return store.collection(self.collection_name)

    async def find_many(
        self,
        store: DocumentStore,
        query: Query,
        *,
        action: str = "fetching",
        subject: str,
    ) -> List[Document]:
        async with self._storage_call(action, subject):
            documents = await self._collection(store).find(query).to_list(length=None)
        return encode_documents(documents)

    async def find_one(
        self,
        store: DocumentStore,
        query: Query,
        *,
        projection: Optional[Query] = None,
        action: str = "fetching",
        subject: str,
        resource_id: Optional[str] = None,
    ) -> Document:
        """
        Single-entity lookup.

        Raises:
            NotFoundError: No document matched (→ 404)
            StorageError:  Driver failure (→ 500)
        """
        async with self._storage_call(action, subject):
            document = await self._collection(store).find_one(query, projection)
        if document is None:
            raise NotFoundError(resource=self.resource, resource_id=resource_id)
        return encode_document(document)

    async def insert_one(
        self,
        store: DocumentStore,
        document: Document,
        *,
        action: str = "creating",
        subject: str,
        expose_reason: bool = False,
    ) -> InsertResult:
        async with self._storage_call(action, subject, expose_reason=expose_reason):
            result = await self._collection(store).insert_one(document)
        logger.info("Inserted into '%s': %s", self.collection_name, result.inserted_id)
        return InsertResult.from_driver(result)

    async def update_one(
        self,
        store: DocumentStore,
        query: Query,
        update: Query,
        *,
        action: str = "updating",
        subject: str,
    ) -> UpdateResult:
        async with self._storage_call(action, subject):
            result = await self._collection(store).update_one(query, update)
        if result.matched_count == 0:
            logger.debug("Update on '%s' matched nothing: %s", self.collection_name, query)
        return UpdateResult.from_driver(result)

    async def delete_one(
        self,
        store: DocumentStore,
        query: Query,
        *,
        action: str = "deleting",
        subject: str,
    ) -> DeleteResult:
        async with self._storage_call(action, subject):
            result = await self._collection(store).delete_one(query)
        return DeleteResult.from_driver(result)

"""
LinkHub Backend — Post Service
================================

What:  Storage operations behind the /posts endpoints.

Creation:
    The stored document is built from the PostCreate body (postId, userId,
    content, likes; only the keys the client sent) plus `createdAt` taken
    from the server clock at insert time. A client-supplied createdAt never
    reaches the database.

Likes:
    `$inc` by one. A post created without `likes` starts counting from zero.
"""

from datetime import datetime
from typing import Callable, List

from linkhub import queries
from linkhub.database import Collections, DocumentStore
from linkhub.schemas.common import DeleteResult, Document, InsertResult, UpdateResult
from linkhub.schemas.post import PostCreate
from linkhub.services.collection_service import CollectionService, utcnow


POST_ID = "postId"


class PostService(CollectionService):
    collection_name = Collections.POSTS
    resource = "post"

    def __init__(self, clock: Callable[[], datetime] = utcnow):
        self._clock = clock

    async def list_posts(self, store: DocumentStore) -> List[Document]:
        return await self.find_many(store, queries.match_all(), subject="posts")

    async def get_post(self, store: DocumentStore, post_id: str) -> Document:
        return await self.find_one(
            store, queries.match(POST_ID, post_id), subject="post", resource_id=post_id
        )

    async def create_post(self, store: DocumentStore, post: PostCreate) -> InsertResult:
        """
        Raises:
            StorageError: with the driver's error text exposed in details
        """
        document = post.to_document()
        document["createdAt"] = self._clock()
        return await self.insert_one(store, document, subject="post", expose_reason=True)

    async def like_post(self, store: DocumentStore, post_id: str) -> UpdateResult:
        return await self.update_one(
            store,
            queries.match(POST_ID, post_id),
            queries.increment("likes"),
            action="liking",
            subject="post",
        )

    async def delete_post(self, store: DocumentStore, post_id: str) -> DeleteResult:
        return await self.delete_one(store, queries.match(POST_ID, post_id), subject="post")


post_service = PostService()

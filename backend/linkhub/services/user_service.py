"""
LinkHub Backend — User Service
================================

What:  Storage operations behind the /users endpoints.
How:   Every method builds its query documents with linkhub.queries and makes
       exactly one CollectionService call.

Identifier:
    Users are addressed by their `userId` field, not by MongoDB's _id.
    Nothing enforces userId uniqueness; single-entity calls act on the first
    matching document.
"""

from typing import List, Optional

from linkhub import queries
from linkhub.database import Collections, DocumentStore
from linkhub.schemas.common import DeleteResult, Document, InsertResult, UpdateResult
from linkhub.services.collection_service import CollectionService


USER_ID = "userId"


class UserService(CollectionService):
    collection_name = Collections.USERS
    resource = "user"

    async def list_users(self, store: DocumentStore) -> List[Document]:
        return await self.find_many(store, queries.match_all(), subject="users")

    async def get_user(self, store: DocumentStore, user_id: str) -> Document:
        return await self.find_one(
            store,
            queries.match(USER_ID, user_id),
            subject="user",
            resource_id=user_id,
        )

    async def create_user(self, store: DocumentStore, document: Optional[Document]) -> InsertResult:
        """Insert the body as-is; no field is required, an empty body inserts {}."""
        return await self.insert_one(store, dict(document or {}), subject="user")

    async def update_headline(
        self, store: DocumentStore, user_id: str, headline: Optional[str]
    ) -> UpdateResult:
        return await self.update_one(
            store,
            queries.match(USER_ID, user_id),
            queries.set_fields(headline=headline),
            subject="user",
        )

    async def delete_user(self, store: DocumentStore, user_id: str) -> DeleteResult:
        """Removes at most one user. Posts and connections are left untouched."""
        return await self.delete_one(store, queries.match(USER_ID, user_id), subject="user")

    async def get_profile_views(self, store: DocumentStore, user_id: str) -> Document:
        return await self.find_one(
            store,
            queries.match(USER_ID, user_id),
            projection=queries.only("profileViews"),
            subject="profile views",
            resource_id=user_id,
        )

    async def add_skill(self, store: DocumentStore, user_id: str, skill: Optional[str]) -> UpdateResult:
        return await self.update_one(
            store,
            queries.match(USER_ID, user_id),
            queries.push("skills", skill),
            action="adding",
            subject="skill",
        )

    async def upgrade_to_premium(self, store: DocumentStore, user_id: str) -> UpdateResult:
        return await self.update_one(
            store,
            queries.match(USER_ID, user_id),
            queries.set_fields(isPremium=True),
            action="upgrading",
            subject="account",
        )


user_service = UserService()

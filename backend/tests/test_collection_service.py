"""
LinkHub Backend — Collection Service Unit Tests
=================================================

What:  Tests for the shared storage operations and failure boundary.
How:   Mock collections (no real DB).

What we test:
    ✅ Driver exceptions become StorageError with an action/resource message
    ✅ Driver error text is only exposed when asked for
    ✅ find_one turns None into NotFoundError
    ✅ ObjectIds are rendered as strings
    ✅ Zero-affected writes are returned, not raised
"""

import pytest
from bson import ObjectId
from pymongo.errors import ServerSelectionTimeoutError

from conftest import delete_ack, insert_ack, update_ack
from linkhub.exceptions import NotFoundError, StorageError
from linkhub.services.collection_service import CollectionService


class WidgetService(CollectionService):
    collection_name = "widgets"
    resource = "widget"


class TestFailureBoundary:

    def setup_method(self):
        self.service = WidgetService()

    @pytest.mark.asyncio
    async def test_driver_error_becomes_storage_error(self, mock_store, mock_cursor):
        mock_cursor.to_list.side_effect = ServerSelectionTimeoutError("no servers")

        with pytest.raises(StorageError) as exc_info:
            await self.service.find_many(mock_store, {}, subject="widgets")

        err = exc_info.value
        assert err.message == "Error fetching widgets"
        assert err.context["collection"] == "widgets"
        assert err.context["error_type"] == "ServerSelectionTimeoutError"
        assert isinstance(err.__cause__, ServerSelectionTimeoutError)

    @pytest.mark.asyncio
    async def test_reason_hidden_by_default(self, mock_store, mock_collection):
        mock_collection.update_one.side_effect = RuntimeError("Cannot apply $inc")

        with pytest.raises(StorageError) as exc_info:
            await self.service.update_one(
                mock_store, {"a": 1}, {"$inc": {"n": 1}}, action="liking", subject="widget"
            )

        assert exc_info.value.message == "Error liking widget"
        assert exc_info.value.reason == "Cannot apply $inc"
        assert exc_info.value.public_details is None

    @pytest.mark.asyncio
    async def test_reason_exposed_on_request(self, mock_store, mock_collection):
        mock_collection.insert_one.side_effect = RuntimeError("duplicate key")

        with pytest.raises(StorageError) as exc_info:
            await self.service.insert_one(mock_store, {}, subject="widget", expose_reason=True)

        assert exc_info.value.public_details == {"reason": "duplicate key"}


class TestOperations:

    def setup_method(self):
        self.service = WidgetService()

    @pytest.mark.asyncio
    async def test_find_one_not_found(self, mock_store, mock_collection):
        mock_collection.find_one.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await self.service.find_one(mock_store, {"id": "w1"}, subject="widget", resource_id="w1")

        assert exc_info.value.message == "Widget not found"
        assert exc_info.value.context["resource_id"] == "w1"

    @pytest.mark.asyncio
    async def test_find_one_passes_projection(self, mock_store, mock_collection):
        oid = ObjectId()
        mock_collection.find_one.return_value = {"_id": oid, "n": 3}

        result = await self.service.find_one(
            mock_store, {"id": "w1"}, projection={"n": 1}, subject="widget"
        )

        mock_collection.find_one.assert_awaited_once_with({"id": "w1"}, {"n": 1})
        assert result == {"_id": str(oid), "n": 3}

    @pytest.mark.asyncio
    async def test_find_many_encodes_object_ids(self, mock_store, mock_collection, mock_cursor):
        oid = ObjectId()
        mock_cursor.to_list.return_value = [{"_id": oid, "ref": {"inner": oid}}]

        result = await self.service.find_many(mock_store, {"x": 1}, subject="widgets")

        mock_collection.find.assert_called_once_with({"x": 1})
        assert result == [{"_id": str(oid), "ref": {"inner": str(oid)}}]

    @pytest.mark.asyncio
    async def test_insert_returns_string_id(self, mock_store, mock_collection):
        oid = ObjectId()
        mock_collection.insert_one.return_value = insert_ack(oid)

        result = await self.service.insert_one(mock_store, {"a": 1}, subject="widget")

        assert result.inserted_id == str(oid)
        assert result.model_dump(by_alias=True) == {"acknowledged": True, "insertedId": str(oid)}

    @pytest.mark.asyncio
    async def test_update_matching_nothing_is_not_an_error(self, mock_store, mock_collection):
        mock_collection.update_one.return_value = update_ack(matched=0, modified=0)

        result = await self.service.update_one(mock_store, {"id": "nope"}, {"$set": {"a": 1}}, subject="widget")

        assert result.matched_count == 0
        assert result.model_dump(by_alias=True) == {
            "acknowledged": True,
            "matchedCount": 0,
            "modifiedCount": 0,
            "upsertedId": None,
            "upsertedCount": 0,
        }

    @pytest.mark.asyncio
    async def test_delete_matching_nothing_is_not_an_error(self, mock_store, mock_collection):
        mock_collection.delete_one.return_value = delete_ack(deleted=0)

        result = await self.service.delete_one(mock_store, {"id": "nope"}, subject="widget")

        assert result.deleted_count == 0
        mock_store.collection.assert_called_with("widgets")

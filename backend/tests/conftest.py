"""
LinkHub Backend — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Tests never talk to a real MongoDB.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_collection: AsyncMock collection for service unit tests
    ├── mock_store:      DocumentStore-like object returning mock_collection
    ├── mongo_store:     DocumentStore over an in-memory mongomock-motor client
    └── test_client:     HTTPX AsyncClient bound to an app serving mongo_store
"""

import os
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

# Override settings BEFORE any app imports
os.environ["MONGO_URL"] = "mongodb://127.0.0.1:1"
os.environ["MONGO_DB_NAME"] = "linkhub_test"
os.environ["LOG_LEVEL"] = "WARNING"

from linkhub.database import DocumentStore  # noqa: E402
from linkhub.main import create_app  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# Mocked storage (unit tests)
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_cursor():
    """Cursor returned by mock_collection.find(); set `to_list.return_value`."""
    cursor = MagicMock()
    cursor.to_list = AsyncMock(return_value=[])
    return cursor


@pytest.fixture
def mock_collection(mock_cursor):
    """
    Mock motor collection.

    Usage:
        async def test_get_user(mock_store, mock_collection):
            mock_collection.find_one.return_value = {"userId": "u1"}
            result = await user_service.get_user(mock_store, "u1")
    """
    collection = MagicMock()
    collection.find = MagicMock(return_value=mock_cursor)
    collection.find_one = AsyncMock(return_value=None)
    collection.insert_one = AsyncMock()
    collection.update_one = AsyncMock()
    collection.delete_one = AsyncMock()
    return collection


@pytest.fixture
def mock_store(mock_collection):
    store = MagicMock(spec=DocumentStore)
    store.collection.return_value = mock_collection
    store.ping = AsyncMock()
    return store


def insert_ack(inserted_id):
    return MagicMock(acknowledged=True, inserted_id=inserted_id)


def update_ack(matched=1, modified=1):
    return MagicMock(acknowledged=True, matched_count=matched, modified_count=modified, upserted_id=None)


def delete_ack(deleted=1):
    return MagicMock(acknowledged=True, deleted_count=deleted)


# ══════════════════════════════════════════════════════════════════════════
# In-memory MongoDB (API tests)
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mongo_store():
    """DocumentStore backed by mongomock-motor; empty for every test."""
    return DocumentStore(AsyncMongoMockClient(), "linkhub_test")


@pytest_asyncio.fixture
async def test_client(mongo_store):
    """
    HTTPX AsyncClient talking to a fresh app over ASGITransport.

    ASGITransport does not run the lifespan, so the injected store is the
    only one the app ever sees.

    Usage:
        async def test_list_users(test_client):
            response = await test_client.get("/users")
            assert response.status_code == 200
    """
    app = create_app(store=mongo_store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

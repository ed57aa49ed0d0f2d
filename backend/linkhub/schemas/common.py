"""
LinkHub Backend — Shared Response Schemas
===========================================

What:  Pydantic models for write acknowledgements, errors and health,
       plus the JSON encoding used for raw documents.
Why:   The API returns the driver's acknowledgement for every write. Shaping
       it here keeps routes free of pymongo result objects.

Wire format:
    Write results use camelCase keys (insertedId, matchedCount, ...), the
    same keys MongoDB's own drivers report. Python attributes stay snake_case.
"""

from typing import Any, Dict, List, Optional

from bson import ObjectId
from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Document = Dict[str, Any]


def encode_document(document: Document) -> Document:
    """Render a stored document as JSON-safe data (ObjectId → hex string)."""
    return jsonable_encoder(document, custom_encoder={ObjectId: str})


def encode_documents(documents: List[Document]) -> List[Document]:
    return [encode_document(document) for document in documents]


def _id_or_none(value: Any) -> Optional[str]:
    return None if value is None else str(value)


class _WriteResult(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    acknowledged: bool = Field(default=True, description="Whether the server acknowledged the write")


class InsertResult(_WriteResult):
    """Acknowledgement of an insert-one."""

    inserted_id: Optional[str] = Field(default=None, description="Store-assigned _id of the new document")

    @classmethod
    def from_driver(cls, result: Any) -> "InsertResult":
        return cls(
            acknowledged=result.acknowledged,
            inserted_id=_id_or_none(result.inserted_id),
        )


class UpdateResult(_WriteResult):
    """
    Acknowledgement of an update-one.

    matched_count == 0 means no document carried the identifier; this is
    reported as-is with HTTP 200, never as a 404.
    """

    matched_count: int = Field(default=0)
    modified_count: int = Field(default=0)
    upserted_id: Optional[str] = Field(default=None)
    upserted_count: int = Field(default=0)

    @classmethod
    def from_driver(cls, result: Any) -> "UpdateResult":
        upserted_id = _id_or_none(result.upserted_id)
        return cls(
            acknowledged=result.acknowledged,
            matched_count=result.matched_count,
            modified_count=result.modified_count,
            upserted_id=upserted_id,
            upserted_count=0 if upserted_id is None else 1,
        )


class DeleteResult(_WriteResult):
    """Acknowledgement of a delete-one. deleted_count is 0 or 1."""

    deleted_count: int = Field(default=0)

    @classmethod
    def from_driver(cls, result: Any) -> "DeleteResult":
        return cls(acknowledged=result.acknowledged, deleted_count=result.deleted_count)


# ══════════════════════════════════════════════════════════════════════════
# Error & Health
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Standardized error body for all API errors.

    Example:
        {
            "error": "storage_error",
            "message": "Error fetching users",
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="MongoDB connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")

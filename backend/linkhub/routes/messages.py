"""
LinkHub Backend — Message Route Handlers
==========================================

What:  /messages endpoints: inbox, send, delete.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends

from linkhub.database import DocumentStore, get_store
from linkhub.schemas.common import DeleteResult, ErrorResponse, InsertResult
from linkhub.services.message_service import message_service

router = APIRouter(prefix="/messages", tags=["Messages"])

_ERRORS = {500: {"description": "Storage error", "model": ErrorResponse}}


@router.get(
    "/{user_id}",
    response_model=List[Dict[str, Any]],
    responses=_ERRORS,
    summary="List messages sent to a user",
)
async def list_messages(user_id: str, store: DocumentStore = Depends(get_store)) -> List[Dict[str, Any]]:
    return await message_service.list_messages(store, user_id)


@router.post(
    "",
    response_model=InsertResult,
    responses=_ERRORS,
    summary="Send a message",
    description="Stores the JSON body with a server-assigned sendAt.",
)
async def send_message(
    document: Optional[Dict[str, Any]] = Body(default=None),
    store: DocumentStore = Depends(get_store),
) -> InsertResult:
    return await message_service.send_message(store, document)


@router.delete(
    "/{message_id}",
    response_model=DeleteResult,
    responses=_ERRORS,
    summary="Delete a message by its _id",
    description=(
        "A message_id that is not a valid ObjectId deletes nothing and returns "
        "deletedCount 0 rather than an error."
    ),
)
async def delete_message(message_id: str, store: DocumentStore = Depends(get_store)) -> DeleteResult:
    return await message_service.delete_message(store, message_id)

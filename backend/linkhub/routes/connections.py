"""
LinkHub Backend — Connection Route Handlers
=============================================

What:  /connections endpoints: list by user, send, accept, remove.

Note the path parameter of GET is a userId while PATCH/DELETE take a
connectionId; both live under the same prefix.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends

from linkhub.database import DocumentStore, get_store
from linkhub.schemas.common import DeleteResult, ErrorResponse, InsertResult, UpdateResult
from linkhub.services.connection_service import connection_service

router = APIRouter(prefix="/connections", tags=["Connections"])

_ERRORS = {500: {"description": "Storage error", "model": ErrorResponse}}


@router.get(
    "/{user_id}",
    response_model=List[Dict[str, Any]],
    responses=_ERRORS,
    summary="List connections initiated by a user",
    description="Returns connections where the user is `user1` only.",
)
async def list_connections(user_id: str, store: DocumentStore = Depends(get_store)) -> List[Dict[str, Any]]:
    return await connection_service.list_connections(store, user_id)


@router.post("", response_model=InsertResult, responses=_ERRORS, summary="Send a connection request")
async def send_request(
    document: Optional[Dict[str, Any]] = Body(default=None),
    store: DocumentStore = Depends(get_store),
) -> InsertResult:
    return await connection_service.send_request(store, document)


@router.patch(
    "/{connection_id}",
    response_model=UpdateResult,
    responses=_ERRORS,
    summary="Accept a connection request",
)
async def accept_request(connection_id: str, store: DocumentStore = Depends(get_store)) -> UpdateResult:
    return await connection_service.accept_request(store, connection_id)


@router.delete(
    "/{connection_id}",
    response_model=DeleteResult,
    responses=_ERRORS,
    summary="Remove a connection",
)
async def remove_connection(connection_id: str, store: DocumentStore = Depends(get_store)) -> DeleteResult:
    return await connection_service.remove_connection(store, connection_id)

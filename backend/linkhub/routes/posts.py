"""
LinkHub Backend — Post Route Handlers
=======================================

What:  /posts endpoints: list, get, create, like, delete.

POST /posts is registered once, for posts only. Sending a message is
POST /messages.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, status

from linkhub.database import DocumentStore, get_store
from linkhub.schemas.common import DeleteResult, ErrorResponse, InsertResult, UpdateResult
from linkhub.schemas.post import PostCreate
from linkhub.services.post_service import post_service

router = APIRouter(prefix="/posts", tags=["Posts"])

_ERRORS = {500: {"description": "Storage error", "model": ErrorResponse}}


@router.get("", response_model=List[Dict[str, Any]], responses=_ERRORS, summary="List all posts")
async def list_posts(store: DocumentStore = Depends(get_store)) -> List[Dict[str, Any]]:
    return await post_service.list_posts(store)


@router.get(
    "/{post_id}",
    response_model=Dict[str, Any],
    responses={404: {"description": "Post not found", "model": ErrorResponse}, **_ERRORS},
    summary="Get a post by postId",
)
async def get_post(post_id: str, store: DocumentStore = Depends(get_store)) -> Dict[str, Any]:
    return await post_service.get_post(store, post_id)


@router.post(
    "",
    response_model=InsertResult,
    status_code=status.HTTP_201_CREATED,
    responses={
        500: {
            "description": "Storage error; details.reason carries the driver message",
            "model": ErrorResponse,
        },
    },
    summary="Create a post",
    description="createdAt is always set by the server; a client-supplied value is ignored.",
)
async def create_post(
    post: Optional[PostCreate] = None,
    store: DocumentStore = Depends(get_store),
) -> InsertResult:
    return await post_service.create_post(store, post or PostCreate())


@router.patch(
    "/{post_id}/likes",
    response_model=UpdateResult,
    responses=_ERRORS,
    summary="Like a post",
)
async def like_post(post_id: str, store: DocumentStore = Depends(get_store)) -> UpdateResult:
    return await post_service.like_post(store, post_id)


@router.delete("/{post_id}", response_model=DeleteResult, responses=_ERRORS, summary="Delete a post")
async def delete_post(post_id: str, store: DocumentStore = Depends(get_store)) -> DeleteResult:
    return await post_service.delete_post(store, post_id)

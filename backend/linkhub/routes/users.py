"""
LinkHub Backend — User Route Handlers
=======================================

What:  /users endpoints: list, get, create, update headline, delete,
       profile views, add skill, upgrade to premium.
How:   Extract path/body values, delegate to UserService, return its result.
       Errors are raised by the service and formatted by the global handlers.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends

from linkhub.database import DocumentStore, get_store
from linkhub.schemas.common import DeleteResult, ErrorResponse, InsertResult, UpdateResult
from linkhub.schemas.user import HeadlineUpdate, SkillAdd
from linkhub.services.user_service import user_service


router = APIRouter(prefix="/users", tags=["Users"])

_ERRORS = {500: {"description": "Storage error", "model": ErrorResponse}}
_LOOKUP_ERRORS = {
    404: {"description": "User not found", "model": ErrorResponse},
    **_ERRORS,
}


@router.get("", response_model=List[Dict[str, Any]], responses=_ERRORS, summary="List all users")
async def list_users(store: DocumentStore = Depends(get_store)) -> List[Dict[str, Any]]:
    return await user_service.list_users(store)


@router.get(
    "/{user_id}",
    response_model=Dict[str, Any],
    responses=_LOOKUP_ERRORS,
    summary="Get a user by userId",
)
async def get_user(user_id: str, store: DocumentStore = Depends(get_store)) -> Dict[str, Any]:
    return await user_service.get_user(store, user_id)


@router.post(
    "",
    response_model=InsertResult,
    responses=_ERRORS,
    summary="Create a user",
    description="Stores the JSON body as-is. No field is required.",
)
async def create_user(
    document: Optional[Dict[str, Any]] = Body(default=None),
    store: DocumentStore = Depends(get_store),
) -> InsertResult:
    return await user_service.create_user(store, document)


@router.patch(
    "/{user_id}",
    response_model=UpdateResult,
    responses=_ERRORS,
    summary="Update a user's headline",
)
async def update_headline(
    user_id: str,
    update: Optional[HeadlineUpdate] = None,
    store: DocumentStore = Depends(get_store),
) -> UpdateResult:
    update = update or HeadlineUpdate()
    return await user_service.update_headline(store, user_id, update.headline)


@router.delete(
    "/{user_id}",
    response_model=DeleteResult,
    responses=_ERRORS,
    summary="Delete a user",
    description="Deleting an unknown userId is not an error: deletedCount is 0.",
)
async def delete_user(user_id: str, store: DocumentStore = Depends(get_store)) -> DeleteResult:
    return await user_service.delete_user(store, user_id)


@router.get(
    "/{user_id}/profile-views",
    response_model=Dict[str, Any],
    responses=_LOOKUP_ERRORS,
    summary="Get a user's profile view count",
)
async def get_profile_views(user_id: str, store: DocumentStore = Depends(get_store)) -> Dict[str, Any]:
    return await user_service.get_profile_views(store, user_id)


@router.put(
    "/{user_id}/skills",
    response_model=UpdateResult,
    responses=_ERRORS,
    summary="Append a skill to a user",
)
async def add_skill(
    user_id: str,
    body: Optional[SkillAdd] = None,
    store: DocumentStore = Depends(get_store),
) -> UpdateResult:
    body = body or SkillAdd()
    return await user_service.add_skill(store, user_id, body.skill)


@router.patch(
    "/{user_id}/premium",
    response_model=UpdateResult,
    responses=_ERRORS,
    summary="Upgrade a user to premium",
)
async def upgrade_to_premium(user_id: str, store: DocumentStore = Depends(get_store)) -> UpdateResult:
    return await user_service.upgrade_to_premium(store, user_id)

"""
LinkHub Backend — User Request Schemas
========================================

Bodies for the user endpoints that read a single field. Creating a user
takes the raw JSON object instead, so it has no schema here.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class HeadlineUpdate(BaseModel):
    """
    Body of PATCH /users/{userId}.

    A missing headline is kept as None and written as null; the update is
    issued either way. Any JSON value is accepted and stored unchanged.
    """
    headline: Optional[Any] = Field(default=None, description="New profile headline")


class SkillAdd(BaseModel):
    """Body of PUT /users/{userId}/skills."""
    skill: Optional[Any] = Field(default=None, description="Skill appended to the user's skills list")

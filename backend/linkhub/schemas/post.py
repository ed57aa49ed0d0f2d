"""
LinkHub Backend — Post Request Schemas
========================================
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PostCreate(BaseModel):
    """
    Body of POST /posts.

    Only postId, userId, content and likes are stored. createdAt is accepted
    so clients that send it are not rejected, but the server always replaces
    it with its own clock. Unknown keys are dropped. Values are stored as
    sent, whatever their JSON type.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    post_id: Optional[Any] = Field(default=None, description="Application-level post identifier")
    user_id: Optional[Any] = Field(default=None, description="Author's userId")
    content: Optional[Any] = Field(default=None, description="Post text")
    likes: Optional[Any] = Field(default=None, description="Initial like count")
    created_at: Optional[Any] = Field(default=None, description="Ignored; set by the server")

    def to_document(self) -> dict:
        """Fields the client actually sent, camelCased, without createdAt."""
        return self.model_dump(by_alias=True, exclude_unset=True, exclude={"created_at"})

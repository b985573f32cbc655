"""Post request/response schemas for the gateway.

Endpoints:
    POST   /api/post/create_post
    PATCH  /api/post/update_post/{post_id}
    DELETE /api/post/delete_post/{post_id}
    GET    /api/post/get_all_post?page=&limits=
    GET    /api/post/get_post/{post_id}
"""

from datetime import datetime
from typing import Any, Literal
from uuid import UUID

from pydantic import BaseModel, Field


class CreatePostRequest(BaseModel):
    """Request schema for post creation."""

    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)


class UpdatePostRequest(BaseModel):
    """Request schema for a partial post update."""

    title: str | None = Field(default=None, min_length=1, max_length=255)
    content: str | None = Field(default=None, min_length=1)


class PostResponse(BaseModel):
    """A single post."""

    id: UUID
    user_id: UUID
    username: str
    title: str
    content: str
    created_at: datetime

    @classmethod
    def from_message(cls, message: dict[str, Any]) -> "PostResponse":
        """Build from a post RPC message."""
        return cls.model_validate(message)


class PostEnvelope(BaseModel):
    status: Literal["success"] = "success"
    post: PostResponse


class PostListResponse(BaseModel):
    status: Literal["success"] = "success"
    page: int
    limits: int
    posts: list[PostResponse]


class PostDeletedResponse(BaseModel):
    status: Literal["success"] = "success"
    message: str = "Post deleted"

# 📄 File: devconnect/modules/community/presentation/api/schemas/post_schemas.py
# 🧭 Purpose (Layman Explanation):
# Describes what a new post or comment must contain and how posts, likes and comments
# look when the app sends them back to the browser.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for the community feed with required-text validation
# and domain conversion helpers.
#
# 🔗 Dependencies:
# - pydantic for schema validation and serialization
# - devconnect.modules.community.domain.models.post (domain conversion)
#
# 🔄 Connected Modules / Calls From:
# - devconnect.modules.community.presentation.api.v1.posts

"""
Community API Schemas

Request Schemas:
- PostCreateRequest: New post text
- CommentCreateRequest: New comment text

Response Schemas:
- PostResponse: Post with likes and comments
- LikeResponse / CommentResponse: List entries returned by like and comment endpoints
- MessageResponse: Plain confirmation
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from devconnect.modules.community.domain.models.post import Comment, Like, Post


class _TextRequest(BaseModel):
    text: str = Field(..., min_length=1, description="Body text")

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Text is required")
        return v


class PostCreateRequest(_TextRequest):
    """New post request schema."""

    model_config = ConfigDict(
        json_schema_extra={"example": {"text": "Just shipped my first FastAPI service"}}
    )


class CommentCreateRequest(_TextRequest):
    """New comment request schema."""

    model_config = ConfigDict(json_schema_extra={"example": {"text": "Congrats!"}})


class LikeResponse(BaseModel):
    id: str
    user: str

    @classmethod
    def from_domain(cls, like: Like) -> "LikeResponse":
        return cls(id=like.id, user=like.user)


class CommentResponse(BaseModel):
    id: str
    user: str
    text: str
    name: str
    avatar: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentResponse":
        return cls(**comment.model_dump())


class PostResponse(BaseModel):
    """
    Post response schema.

    ``name`` and ``avatar`` are the author's details when the post was
    written; later account changes do not touch them.
    """

    id: str = Field(..., description="Post ID")
    user: str = Field(..., description="Author user ID")
    text: str
    name: str = Field(..., description="Author name at posting time")
    avatar: Optional[str] = Field(default=None, description="Author avatar at posting time")
    likes: List[LikeResponse] = Field(default_factory=list)
    comments: List[CommentResponse] = Field(default_factory=list)
    created_at: datetime

    @classmethod
    def from_domain(cls, post: Post) -> "PostResponse":
        return cls(**post.model_dump())


class MessageResponse(BaseModel):
    """Plain confirmation message."""
    msg: str

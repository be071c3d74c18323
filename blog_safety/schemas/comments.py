"""Schemas for comment preparation."""
from __future__ import annotations

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from ..core.config import get_settings
from ..services.comments import CommentStatus


class CommentPayload(BaseModel):
    content: str = Field(description="Comment body as typed by the reader")
    user_id: str = Field(min_length=1, max_length=128, description="Backend user id")
    author_name: str | None = Field(default=None, max_length=64)

    @field_validator("content")
    @classmethod
    def ensure_length(cls, value: str) -> str:
        limit = get_settings().max_comment_length
        if len(value) > limit:
            raise ValueError(f"content must be at most {limit} characters")
        return value


class CommentDraftSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    content: str
    user_id: str
    author_name: str
    is_admin: bool
    moderated: bool
    moderated_reason: str | None
    visible: bool
    status: CommentStatus


class CommentViewSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    author_name: str
    is_admin: bool
    body: str | None
    moderated: bool
    notice: str | None
    reason: str | None


class CommentPrepareResponse(BaseModel):
    comment: CommentDraftSchema
    view: CommentViewSchema

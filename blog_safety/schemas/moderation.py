"""Schemas for text screening endpoints."""
from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class TextCheckPayload(BaseModel):
    text: str = Field(max_length=20000, description="Text to screen; may be empty")


class ModerationVerdictSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    blocked: bool
    moderated: bool
    reason: str | None


class ReviewCheckResponse(BaseModel):
    restricted: bool

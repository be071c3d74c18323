"""Schemas for display-name validation."""
from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class UsernameCheckPayload(BaseModel):
    username: str = Field(max_length=256)


class UsernameCheckSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    allowed: bool
    username: str | None
    reason: str | None

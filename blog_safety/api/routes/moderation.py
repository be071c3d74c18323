"""Text screening routes."""
from __future__ import annotations

from fastapi import APIRouter

from ...policies.moderation import contains_restricted_content, moderate_content
from ...schemas.moderation import (
    ModerationVerdictSchema,
    ReviewCheckResponse,
    TextCheckPayload,
)

router = APIRouter(prefix="/moderation", tags=["moderation"])


@router.post("/check", response_model=ModerationVerdictSchema)
def check_text(payload: TextCheckPayload) -> ModerationVerdictSchema:
    verdict = moderate_content(payload.text)
    return ModerationVerdictSchema.model_validate(verdict)


@router.post("/review-check", response_model=ReviewCheckResponse)
def review_check_text(payload: TextCheckPayload) -> ReviewCheckResponse:
    return ReviewCheckResponse(restricted=contains_restricted_content(payload.text))

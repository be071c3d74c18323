"""Comment preparation routes."""
from __future__ import annotations

from fastapi import APIRouter

from ...schemas.comments import (
    CommentDraftSchema,
    CommentPayload,
    CommentPrepareResponse,
    CommentViewSchema,
)
from ...services.comments import (
    CommentDraft,
    prepare_comment,
    prepare_review_comment,
    render_comment,
)

router = APIRouter(prefix="/comments", tags=["comments"])


def _prepare_response(draft: CommentDraft) -> CommentPrepareResponse:
    return CommentPrepareResponse(
        comment=CommentDraftSchema.model_validate(draft),
        view=CommentViewSchema.model_validate(render_comment(draft)),
    )


@router.post("/prepare", status_code=201, response_model=CommentPrepareResponse)
def prepare_comment_endpoint(payload: CommentPayload) -> CommentPrepareResponse:
    draft = prepare_comment(
        payload.content,
        user_id=payload.user_id,
        author_name=payload.author_name,
    )
    return _prepare_response(draft)


@router.post("/review", status_code=201, response_model=CommentPrepareResponse)
def submit_review_comment(payload: CommentPayload) -> CommentPrepareResponse:
    draft = prepare_review_comment(
        payload.content,
        user_id=payload.user_id,
        author_name=payload.author_name,
    )
    return _prepare_response(draft)

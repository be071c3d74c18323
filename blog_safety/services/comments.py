"""Turn a submitted comment into the record the blog front end stores."""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from fastapi import HTTPException, status

from ..core.config import get_settings
from ..core.logging import get_logger
from ..policies.moderation import (
    ModerationEngine,
    contains_restricted_content,
    moderate_content,
)

logger = get_logger(__name__)

MODERATED_NOTICE = "Content moderated for respectful communication"


class CommentStatus(StrEnum):
    PUBLISHED = "published"
    PENDING = "pending"


@dataclass(frozen=True)
class CommentDraft:
    content: str
    user_id: str
    author_name: str
    is_admin: bool = False
    moderated: bool = False
    moderated_reason: str | None = None
    visible: bool = True
    status: CommentStatus = CommentStatus.PUBLISHED


@dataclass(frozen=True)
class CommentView:
    """What a reader sees for a stored comment."""

    author_name: str
    is_admin: bool
    body: str | None
    moderated: bool
    notice: str | None = None
    reason: str | None = None


def _reject(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=detail)


def _clean_content(content: str) -> str:
    text = content.strip()
    if not text:
        raise _reject("empty_comment")
    return text


def prepare_comment(
    content: str,
    *,
    user_id: str,
    author_name: str | None = None,
    engine: ModerationEngine | None = None,
) -> CommentDraft:
    text = _clean_content(content)
    verdict = engine.evaluate_text(text) if engine is not None else moderate_content(text)

    if verdict.blocked:
        logger.info("comment_blocked", user_id=user_id, reason=verdict.reason)
        raise _reject(verdict.reason or "comment_blocked")

    if verdict.moderated:
        logger.info("comment_flagged", user_id=user_id, reason=verdict.reason)

    return CommentDraft(
        content=text,
        user_id=user_id,
        author_name=author_name or get_settings().anonymous_name,
        moderated=verdict.moderated,
        moderated_reason=verdict.reason,
        visible=not verdict.blocked,
    )


def prepare_review_comment(
    content: str,
    *,
    user_id: str,
    author_name: str | None = None,
) -> CommentDraft:
    """Screen a comment for the review queue; accepted drafts start pending."""
    text = _clean_content(content)
    if contains_restricted_content(text):
        logger.info("review_comment_rejected", user_id=user_id)
        raise _reject("Comment contains restricted content.")

    return CommentDraft(
        content=text,
        user_id=user_id,
        author_name=author_name or get_settings().anonymous_name,
        status=CommentStatus.PENDING,
    )


def render_comment(draft: CommentDraft) -> CommentView:
    if draft.moderated:
        return CommentView(
            author_name=draft.author_name,
            is_admin=draft.is_admin,
            body=None,
            moderated=True,
            notice=MODERATED_NOTICE,
            reason=draft.moderated_reason,
        )
    return CommentView(
        author_name=draft.author_name,
        is_admin=draft.is_admin,
        body=draft.content,
        moderated=False,
    )

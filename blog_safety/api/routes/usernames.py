"""Display-name validation routes."""
from __future__ import annotations

from fastapi import APIRouter

from ...policies.usernames import check_username
from ...schemas.usernames import UsernameCheckPayload, UsernameCheckSchema

router = APIRouter(prefix="/usernames", tags=["usernames"])


@router.post("/check", response_model=UsernameCheckSchema)
def check_username_endpoint(payload: UsernameCheckPayload) -> UsernameCheckSchema:
    """Validate a name; a rejected name is still a 200 with ``allowed`` false."""
    result = check_username(payload.username)
    return UsernameCheckSchema.model_validate(result)

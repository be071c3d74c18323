"""Display-name checks applied when a reader sets or changes their name."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..core.config import get_settings


@dataclass(frozen=True, slots=True)
class UsernameCheck:
    allowed: bool
    username: str | None = None
    reason: str | None = None


def _utf16_length(text: str) -> int:
    # Browsers count UTF-16 code units, so astral characters count twice.
    return len(text.encode("utf-16-le")) // 2


def is_username_restricted(name: str, restricted: Iterable[str] | None = None) -> bool:
    """True when ``name`` contains any reserved substring, ignoring case."""
    if restricted is None:
        restricted = get_settings().restricted_usernames
    lowered = name.lower()
    return any(term.lower() in lowered for term in restricted)


def check_username(
    raw: str,
    *,
    restricted: Iterable[str] | None = None,
    max_length: int | None = None,
) -> UsernameCheck:
    """Trim and validate a candidate display name."""
    if max_length is None:
        max_length = get_settings().username_max_length

    username = raw.strip()
    if not username:
        return UsernameCheck(allowed=False, reason="Please enter a username")
    if is_username_restricted(username, restricted):
        return UsernameCheck(allowed=False, reason="This username is not allowed")
    if _utf16_length(username) > max_length:
        return UsernameCheck(
            allowed=False,
            reason=f"Username must be less than {max_length} characters.",
        )
    return UsernameCheck(allowed=True, username=username)

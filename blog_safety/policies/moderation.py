"""Rule-based moderation for comment text."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True, slots=True)
class ModerationVerdict:
    """Outcome of screening one piece of text.

    ``blocked`` text must not be stored. ``moderated`` text may be stored but is
    shown to readers behind a notice carrying ``reason``.
    """

    blocked: bool
    moderated: bool
    reason: str | None = None


CLEAN = ModerationVerdict(blocked=False, moderated=False, reason=None)


@dataclass(frozen=True, slots=True)
class ModerationRule:
    pattern: re.Pattern[str]
    reason: str

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


# ASCII-only case folding and word boundaries.
_FLAGS = re.IGNORECASE | re.ASCII


def _rule(pattern: str, reason: str, flags: int = _FLAGS) -> ModerationRule:
    return ModerationRule(pattern=re.compile(pattern, flags), reason=reason)


BLOCKING_RULES: tuple[ModerationRule, ...] = (
    _rule(r"eldrex.*delos.*reyes.*bula", "Admin impersonation"),
    _rule(r"admin.*password", "Security concern"),
    _rule(r"hack|hacking|exploit", "Security concern"),
    _rule(r"spam.*link|http.*://", "No links allowed"),
    _rule(r"@.*\..*", "No email addresses", flags=re.ASCII),
)

MODERATION_RULES: tuple[ModerationRule, ...] = (
    _rule(r"idiot|stupid|dumb|ugly", "Disrespectful language"),
    _rule(r"hate|kill|die|suicide", "Harmful content"),
    _rule(r"shit|fuck|damn|asshole", "Profanity"),
    _rule(r"racist|sexist|homophobic", "Discriminatory language"),
    _rule(r"cunt|bitch|whore", "Offensive language"),
)

# Stricter yes/no screen used for comments that go to the review queue.
_REVIEW_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        r"\b(?:fuck|shit|asshole|bitch|bastard|damn|cunt|piss|dick)\b", _FLAGS
    ),
    re.compile(r"(?:\bkill\b|\bmurder\b|\bdie\b|\bsuicide\b)", _FLAGS),
    re.compile(r"(?:http|https)://[^\s]+"),
    re.compile(r"<script[\s\S]*?>[\s\S]*?</script>", _FLAGS),
)


class ModerationEngine:
    """Ordered rule evaluator; blocking rules always run before moderation rules."""

    def __init__(
        self,
        blocking_rules: Sequence[ModerationRule] = BLOCKING_RULES,
        moderation_rules: Sequence[ModerationRule] = MODERATION_RULES,
    ) -> None:
        self.blocking_rules = tuple(blocking_rules)
        self.moderation_rules = tuple(moderation_rules)

    def evaluate_text(self, text: str) -> ModerationVerdict:
        """Return the verdict of the first matching rule, or a clean verdict."""
        for rule in self.blocking_rules:
            if rule.matches(text):
                return ModerationVerdict(blocked=True, moderated=False, reason=rule.reason)

        for rule in self.moderation_rules:
            if rule.matches(text):
                return ModerationVerdict(blocked=False, moderated=True, reason=rule.reason)

        return CLEAN


_default_engine = ModerationEngine()


def moderate_content(text: str) -> ModerationVerdict:
    """Classify ``text`` with the built-in rule lists."""
    return _default_engine.evaluate_text(text)


def contains_restricted_content(text: str) -> bool:
    return any(pattern.search(text) for pattern in _REVIEW_PATTERNS)

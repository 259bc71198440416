"""Resolver for the one-shot "Consulting or Recruitment?" follow-up turn.

Stateless: an answer that names neither line gets the same question again.
"""

from __future__ import annotations

from faqbot.intent.catalog import SERVICES_FOLLOWUP, SERVICES_QUESTION, SERVICES_SHORT_QUESTION
from faqbot.intent.matcher import detect_service_line
from faqbot.intent.schema import IntentTable, MatchResult


def resolve_service_choice(text: str | None, table: IntentTable) -> MatchResult:
    """Return the consulting/recruitment detail reply, or repeat the question."""

    line = detect_service_line((text or "").lower())
    if line is not None:
        return MatchResult(reply=table.get(line).replies[0], intent=line, followup=None)

    return MatchResult(
        reply=SERVICES_QUESTION,
        intent=SERVICES_FOLLOWUP,
        followup=SERVICES_SHORT_QUESTION,
    )

"""Primary message matcher.

Pipeline:
    1) Fast path: consulting/recruitment phrasing resolves directly, skipping scoring.
    2) Keyword scoring over the table in order.
    3) Accept the winner at score >= 2, otherwise answer with the fallback.
    4) A close call won by "services" appends the Consulting/Recruitment question.
"""

from __future__ import annotations

import html
import random
import re

from faqbot.intent.catalog import (
    CONSULTING,
    FALLBACK,
    RECRUITMENT,
    SERVICES,
    SERVICES_QUESTION,
    SiteLinks,
    suggested_actions_html,
)
from faqbot.intent.normalize import summarize_message, tokenize
from faqbot.intent.schema import IntentTable, MatchResult
from faqbot.intent.scoring import rank_intents

CONSULTING_RE = re.compile(r"consult(ing)?", flags=re.IGNORECASE)
RECRUITMENT_RE = re.compile(r"recruit(ment|ing)|hire", flags=re.IGNORECASE)

_DEFAULT_RNG = random.Random()


def detect_service_line(text: str) -> str | None:
    """Return `consulting` or `recruitment` when the raw text mentions one (consulting first)."""

    if CONSULTING_RE.search(text):
        return CONSULTING
    if RECRUITMENT_RE.search(text):
        return RECRUITMENT
    return None


def fallback_result(text: str | None, links: SiteLinks) -> MatchResult:
    """Build the generic "navigate the site" reply that echoes the user's message."""

    echoed = html.escape(summarize_message(text))
    reply = (
        f"I can help you navigate the site. You said: “{echoed}”. "
        "Try asking about registration, services, or contact info. "
        f"{suggested_actions_html(links)}"
    )
    return MatchResult(reply=reply, intent=FALLBACK, followup=None)


def match_message(
        text: str | None,
        table: IntentTable,
        links: SiteLinks,
        *,
        rng: random.Random | None = None,
) -> MatchResult:
    """Match a free-text message to a canned reply.

    Never raises for any input text; unmatched input gets the fallback reply.
    """

    raw = text or ""
    rng = rng or _DEFAULT_RNG

    line = detect_service_line(raw)
    if line is not None:
        return MatchResult(reply=table.get(line).replies[0], intent=line, followup=None)

    ranking = rank_intents(tokenize(raw), table)
    best = ranking.best
    if best is None or not ranking.accepted:
        return fallback_result(raw, links)

    reply = rng.choice(best.replies)

    if best.id == SERVICES and ranking.is_close_call:
        followup = best.followup or SERVICES_QUESTION
        return MatchResult(reply=f"{reply} {followup}", intent=SERVICES, followup=followup)

    return MatchResult(reply=reply, intent=best.id, followup=best.followup)

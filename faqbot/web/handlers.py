"""Chat request handlers.

Hard contract: every chat message produces exactly one well-formed `MatchResult`. On any internal
error, reply with the fallback for the received text and log internally.
"""

from __future__ import annotations

import asyncio
import logging
from time import monotonic

from faqbot.app import App
from faqbot.config.settings import Settings
from faqbot.intent.disambiguator import resolve_service_choice
from faqbot.intent.matcher import fallback_result, match_message
from faqbot.intent.schema import MatchResult

logger = logging.getLogger(__name__)


def thinking_delay_seconds(text: str, settings: Settings) -> float:
    """Pause before a chat reply: a base plus a per-character share, capped."""

    if not settings.thinking_delay_enabled:
        return 0.0
    per_char = min(settings.thinking_delay_cap_ms, len(text) * settings.thinking_delay_per_char_ms)
    return (settings.thinking_delay_base_ms + per_char) / 1000


def followup_delay_seconds(app: App) -> float:
    """Pause before a follow-up reply: a base plus random jitter."""

    settings = app.settings
    if not settings.thinking_delay_enabled:
        return 0.0
    jitter = 0
    if settings.followup_delay_jitter_ms:
        jitter = app.rng.randrange(settings.followup_delay_jitter_ms)
    return (settings.followup_delay_base_ms + jitter) / 1000


async def _pause(seconds: float) -> None:
    if seconds > 0:
        await asyncio.sleep(seconds)


async def handle_message(text: str, app: App) -> MatchResult:
    """Answer a free-text chat message."""

    started = monotonic()
    await _pause(thinking_delay_seconds(text, app.settings))

    # noinspection PyBroadException
    try:
        result = match_message(text, app.table, app.links, rng=app.rng)
    except Exception:
        # Handler boundary: the widget must always get a reply.
        logger.exception("matcher failed")
        result = fallback_result(text, app.links)

    latency_ms = int((monotonic() - started) * 1000)
    logger.info(
        "handled endpoint=message intent=%s followup=%s chars=%d latency_ms=%d",
        result.intent,
        result.followup is not None,
        len(text),
        latency_ms,
    )
    return result


async def handle_service_choice(text: str, app: App) -> MatchResult:
    """Answer the "Consulting or Recruitment?" follow-up turn."""

    started = monotonic()
    await _pause(followup_delay_seconds(app))

    # noinspection PyBroadException
    try:
        result = resolve_service_choice(text, app.table)
    except Exception:
        logger.exception("disambiguator failed")
        result = fallback_result(text, app.links)

    latency_ms = int((monotonic() - started) * 1000)
    logger.info(
        "handled endpoint=services-detail intent=%s latency_ms=%d",
        result.intent,
        latency_ms,
    )
    return result

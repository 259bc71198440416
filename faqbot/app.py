"""Application composition root.

This module wires together configuration, site links, the intent table, and the reply randomness
source for the web runtime.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

from faqbot.config.settings import Settings
from faqbot.intent.catalog import SiteLinks, build_intent_table
from faqbot.intent.schema import IntentTable


@dataclass(frozen=True)
class App:
    """Shared application dependencies for handlers."""

    settings: Settings
    links: SiteLinks
    table: IntentTable
    rng: random.Random


def create_app(settings: Settings, *, rng: random.Random | None = None) -> App:
    """Create the application container.

    Note:
        The intent table is built and validated here, so catalog mistakes fail at startup.
    """

    links = SiteLinks.from_base_url(settings.site_base_url, email=settings.contact_email)
    table = build_intent_table(links)
    return App(settings=settings, links=links, table=table, rng=rng or random.Random())

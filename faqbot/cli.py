"""Match a single message from the terminal.

Useful for checking catalog edits without starting the server; no reply delay is applied.
"""

from __future__ import annotations

import argparse
import json
import random

from dotenv import load_dotenv

from faqbot.app import create_app
from faqbot.config.settings import load_settings
from faqbot.intent.disambiguator import resolve_service_choice
from faqbot.intent.matcher import match_message
from faqbot.intent.schema import MatchResult


def ask(message: str, *, followup: bool = False, seed: int | None = None) -> MatchResult:
    """Match `message` with the configured catalog."""

    load_dotenv(".env")
    app = create_app(load_settings(), rng=random.Random(seed))
    if followup:
        return resolve_service_choice(message, app.table)
    return match_message(message, app.table, app.links, rng=app.rng)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""

    parser = argparse.ArgumentParser(description="Print the FAQ bot's reply to a message as JSON.")
    parser.add_argument("message", nargs="?", default="", help="User message (default: empty).")
    parser.add_argument(
        "--followup",
        action="store_true",
        help='Treat the message as an answer to "Consulting or Recruitment?".',
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for reply selection.")
    args = parser.parse_args(argv)

    result = ask(args.message, followup=args.followup, seed=args.seed)
    print(json.dumps(result.model_dump(), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()

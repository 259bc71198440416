"""Logging setup for the FAQ bot web process and CLI."""

from __future__ import annotations

import logging
import os

QUIET_LOGGERS = ("uvicorn.access",)


def configure_logging(level: str | None = None) -> None:
    """Configure Python logging for the process.

    Match decisions and request timings go to the server log only; chat replies never carry
    diagnostic text.
    """

    log_level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    # The app writes its own per-request line, so uvicorn's access log would duplicate it.
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

"""Text normalization for deterministic keyword matching."""

from __future__ import annotations

import re

_NON_WORD_RE = re.compile(r"[^a-z0-9\s]")
_MULTISPACE_RE = re.compile(r"\s+")

ECHO_LIMIT = 120
_ELLIPSIS = "..."


def normalize_text(text: str | None) -> str:
    """Normalize user text for keyword scoring.

    Normalization is intentionally conservative:
        - Lowercase.
        - Replace anything outside `[a-z0-9]` and whitespace with a space.
        - Collapse whitespace and trim.

    The goal is deterministic tokenization, not linguistic stemming. Non-ASCII letters are treated
    as separators, so "café" becomes "caf".
    """

    value = (text or "").lower()
    value = _NON_WORD_RE.sub(" ", value)
    value = _MULTISPACE_RE.sub(" ", value).strip()
    return value


def tokenize(text: str | None) -> list[str]:
    """Split normalized text into tokens (order preserved, no empty tokens)."""

    return [token for token in normalize_text(text).split(" ") if token]


def summarize_message(text: str | None, *, limit: int = ECHO_LIMIT) -> str:
    """Return a single-line copy of the user's message suitable for echoing back.

    Casing and punctuation are preserved; only whitespace is collapsed. Messages longer than
    `limit` characters are cut so that the result, ellipsis included, is exactly `limit` long.
    """

    value = _MULTISPACE_RE.sub(" ", (text or "").strip())
    if len(value) > limit:
        return value[: limit - len(_ELLIPSIS)] + _ELLIPSIS
    return value

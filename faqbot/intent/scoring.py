"""Keyword scoring and ranking over the intent table."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from faqbot.intent.schema import IntentDefinition, IntentTable

KEYWORD_WEIGHT = 2
SYNONYM_WEIGHT = 1
ACCEPT_THRESHOLD = 2


def score_intent(tokens: Iterable[str], intent: IntentDefinition) -> int:
    """Score one intent: +2 per keyword present, +1 per synonym present.

    Presence is set membership, so a keyword repeated in the text still counts once.
    """

    present = set(tokens)
    score = sum(KEYWORD_WEIGHT for keyword in intent.keywords if keyword in present)
    score += sum(SYNONYM_WEIGHT for synonym in intent.synonyms if synonym in present)
    return score


@dataclass(frozen=True)
class Ranking:
    """Best and runner-up intents from a single scan of the table."""

    best: IntentDefinition | None
    best_score: int
    second: IntentDefinition | None
    second_score: int

    @property
    def accepted(self) -> bool:
        return self.best is not None and self.best_score >= ACCEPT_THRESHOLD

    @property
    def is_close_call(self) -> bool:
        """Whether a runner-up exists within one point of the winner."""

        return self.second is not None and abs(self.best_score - self.second_score) <= 1


def rank_intents(tokens: Iterable[str], table: IntentTable) -> Ranking:
    """Scan the table in order and keep the best and second-best intents.

    Both slots only move on a strictly greater score, so earlier intents win ties. A new best
    demotes the previous best to second.
    """

    present = set(tokens)
    best: IntentDefinition | None = None
    second: IntentDefinition | None = None
    best_score = 0
    second_score = 0

    for intent in table.intents:
        score = score_intent(present, intent)
        if score > best_score:
            second, second_score = best, best_score
            best, best_score = intent, score
        elif score > second_score:
            second, second_score = intent, score

    return Ranking(best=best, best_score=best_score, second=second, second_score=second_score)

"""Intent table and match result models (Pydantic).

The intent table is the contract between the hand-authored catalog and the matcher. It is validated
once at process start; requests only ever read it.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

_TOKEN_RE = re.compile(r"[a-z0-9]+")


class IntentTableError(ValueError):
    """Raised when the intent catalog violates a table invariant."""


class IntentDefinition(BaseModel):
    """One recognizable user goal with its canned replies."""

    model_config = ConfigDict(frozen=True, extra="forbid", str_strip_whitespace=True)

    id: str = Field(min_length=1)
    keywords: tuple[str, ...]
    synonyms: tuple[str, ...] = ()
    replies: tuple[str, ...]
    followup: str | None = None

    @field_validator("keywords", "synonyms")
    @classmethod
    def validate_tokens(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        """Keywords and synonyms must already be normalized single tokens."""

        for token in value:
            if not _TOKEN_RE.fullmatch(token):
                raise ValueError(f"not a normalized token: {token!r}")
        return value

    @field_validator("keywords", "replies")
    @classmethod
    def validate_non_empty(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("must contain at least one entry")
        return value

    @model_validator(mode="after")
    def validate_no_repeated_terms(self) -> IntentDefinition:
        """Reject terms listed twice, which would silently double their weight."""

        terms = self.keywords + self.synonyms
        if len(set(terms)) != len(terms):
            raise ValueError(f"intent {self.id!r} lists a keyword or synonym more than once")
        return self


class IntentTable(BaseModel):
    """An ordered, immutable collection of intents.

    Order is meaningful: on equal scores the earlier intent wins.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    intents: tuple[IntentDefinition, ...]

    @model_validator(mode="after")
    def validate_unique_ids(self) -> IntentTable:
        ids = [intent.id for intent in self.intents]
        if len(set(ids)) != len(ids):
            raise ValueError("intent ids must be unique")
        return self

    def get(self, intent_id: str) -> IntentDefinition:
        """Return the intent with the given id.

        Raises:
            KeyError: If the table has no such intent.
        """

        for intent in self.intents:
            if intent.id == intent_id:
                return intent
        raise KeyError(intent_id)


class MatchResult(BaseModel):
    """The reply chosen for a single message."""

    model_config = ConfigDict(frozen=True)

    reply: str
    intent: str
    followup: str | None = None


class ChatRequest(BaseModel):
    """Inbound chat payload.

    Anything other than a string `message` (missing, null, numbers, objects) is read as "".
    """

    model_config = ConfigDict(extra="ignore")

    message: str = ""

    @field_validator("message", mode="before")
    @classmethod
    def coerce_message(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""


def intent_table_from_obj(obj: Any) -> IntentTable:
    """Validate and build an IntentTable from plain data.

    Raises:
        IntentTableError: If any table invariant is violated.
    """

    try:
        return IntentTable.model_validate(obj)
    except ValidationError as exc:
        raise IntentTableError(f"Invalid intent table: {exc}") from exc

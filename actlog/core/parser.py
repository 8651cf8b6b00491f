"""Parse whole utterances: segment, classify each clause, assemble."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Optional, Sequence

from actlog.core.classify import classify_clause
from actlog.core.constants import DEFAULT_MIN_CONFIDENCE, FOOD_WORDS
from actlog.core.models import ActivityKind, ParsedActivity, ParseResult, RawInput
from actlog.utils.text import split_clauses
from actlog.utils.timestamps import clamp_to_now, ensure_aware


logger = logging.getLogger(__name__)


class EmptyInputError(ValueError):
    """Raised by callers' validation when the utterance is blank."""


def validate_text(text: Optional[str]) -> str:
    """Return trimmed text or raise EmptyInputError for blank input."""
    if text is None or not text.strip():
        raise EmptyInputError("Text input is required")
    return text.strip()


def parse_activities(
    text: str,
    occurred_at: Optional[datetime] = None,
    type_hint: Any = None,
    *,
    split: bool = True,
    now: Optional[datetime] = None,
    food_words: Sequence[str] = FOOD_WORDS,
) -> ParseResult:
    """Classify every clause of ``text`` and resolve the activity timestamp.

    Never raises for string input: blank or unmatched text yields a single
    unknown activity. A missing or future ``occurred_at`` becomes now;
    past timestamps are kept.
    """
    clauses = split_clauses(text) if split else [text.strip()]
    activities = tuple(
        classify_clause(clause, type_hint=type_hint, rank=index, food_words=food_words)
        for index, clause in enumerate(clauses)
    )

    resolved = clamp_to_now(occurred_at, now=now)
    if occurred_at is not None and resolved != ensure_aware(occurred_at):
        logger.debug("future timestamp %s clamped to %s", occurred_at.isoformat(), resolved.isoformat())

    return ParseResult(activities=activities, occurred_at=resolved)


def parse_raw_input(raw: RawInput, **kwargs: Any) -> ParseResult:
    """Parse a RawInput record; keyword arguments go to parse_activities."""
    return parse_activities(raw.text, occurred_at=raw.occurred_at, type_hint=raw.type_hint, **kwargs)


def should_persist(activity: ParsedActivity, min_confidence: float = DEFAULT_MIN_CONFIDENCE) -> bool:
    """Callers store an activity only when it is known and confident enough."""
    return activity.kind is not ActivityKind.UNKNOWN and activity.confidence >= min_confidence

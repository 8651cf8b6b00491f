"""Shared command helpers."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Dict, Optional

import typer

from actlog.core.models import ParseResult
from actlog.core.parser import parse_activities, should_persist
from actlog.core.state import CLIState
from actlog.utils.formatting import confirmation_message


def get_state(ctx: typer.Context) -> CLIState:
    """Extract validated CLI state from Typer context."""
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=2)
    return state


def print_json_payload(state: CLIState, payload: Any) -> None:
    """Print JSON payload with plain-mode fallback for piping."""
    if state.plain_output:
        typer.echo(json.dumps(payload, separators=(",", ":")))
        return
    state.console.print_json(data=payload)


def parse_for_state(
    state: CLIState,
    text: str,
    occurred_at: Optional[datetime] = None,
    type_hint: Any = None,
    split: Optional[bool] = None,
) -> ParseResult:
    """Run the parser with the settings resolved from config."""
    return parse_activities(
        text,
        occurred_at=occurred_at,
        type_hint=type_hint,
        split=state.split_multiple if split is None else split,
        food_words=state.food_words,
    )


def result_payload(result: ParseResult, min_confidence: float) -> Dict[str, Any]:
    """Serialize a result, annotating each activity with persistence advice."""
    payload = result.to_dict()
    for activity, item in zip(result.activities, payload["activities"]):
        item["persist"] = should_persist(activity, min_confidence)
        item["message"] = confirmation_message(activity)
    return payload

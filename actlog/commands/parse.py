"""Parse a single utterance."""

from __future__ import annotations

from typing import List, Optional

import typer
from rich.markup import escape
from rich.table import Table

from actlog.commands.common import get_state, parse_for_state, print_json_payload, result_payload
from actlog.core.models import ActivityKind
from actlog.core.parser import EmptyInputError, should_persist, validate_text
from actlog.utils.formatting import confirmation_message, format_confidence, format_fields
from actlog.utils.timestamps import parse_timestamp, validate_timestamp


def parse_command(
    ctx: typer.Context,
    text: List[str] = typer.Argument(..., help="Activity text, e.g. 'ran 5k in 25 minutes'"),
    at: Optional[str] = typer.Option(None, "--at", help="When it happened (ISO-8601)", callback=validate_timestamp),
    type_hint: Optional[str] = typer.Option(None, "--type", help="Suggested kind, used only if the text fits it"),
    no_split: bool = typer.Option(False, "--no-split", help="Treat the text as a single activity"),
    min_confidence: Optional[float] = typer.Option(
        None, help="Persistence threshold (default from config, 0.6)"
    ),
) -> None:
    """Parse free text into structured activities."""
    state = get_state(ctx)

    try:
        raw_text = validate_text(" ".join(text))
    except EmptyInputError as exc:
        raise typer.BadParameter(str(exc), param_hint="TEXT")

    if type_hint is not None and ActivityKind.coerce(type_hint) is None:
        kinds = ", ".join(kind.value for kind in ActivityKind)
        raise typer.BadParameter(f"Unknown kind '{type_hint}'. Choose from: {kinds}", param_hint="--type")

    if min_confidence is not None and not 0.0 <= min_confidence <= 1.0:
        raise typer.BadParameter("must be between 0 and 1", param_hint="--min-confidence")

    threshold = state.min_confidence if min_confidence is None else min_confidence
    result = parse_for_state(
        state,
        raw_text,
        occurred_at=parse_timestamp(at) if at else None,
        type_hint=type_hint,
        split=False if no_split else None,
    )

    if state.json_output:
        print_json_payload(state, result_payload(result, threshold))
        return

    if state.plain_output:
        typer.echo(f"occurred_at\t{result.occurred_at.isoformat()}")
        for activity in result.activities:
            typer.echo(
                "\t".join(
                    [
                        str(activity.rank),
                        activity.kind.value,
                        f"{activity.confidence:.2f}",
                        format_fields(activity),
                        "persist" if should_persist(activity, threshold) else "skip",
                    ]
                )
            )
        return

    table = Table(title=f"Parsed {len(result.activities)} activit{'y' if len(result.activities) == 1 else 'ies'}")
    table.add_column("#", justify="right")
    table.add_column("Kind")
    table.add_column("Details")
    table.add_column("Confidence", justify="right")
    table.add_column("Source")
    for activity in result.activities:
        table.add_row(
            str(activity.rank),
            activity.kind.label,
            escape(format_fields(activity)),
            format_confidence(activity.confidence),
            escape(activity.source_text),
        )
    state.console.print(table)
    if len(result.activities) == 1:
        state.console.print(escape(confirmation_message(result.primary)))
        return
    for activity in result.activities:
        state.console.print(escape(f"{activity.rank}: {confirmation_message(activity)}"))

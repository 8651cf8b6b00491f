"""Show the classification cascade."""

from __future__ import annotations

import typer
from rich.table import Table

from actlog.commands.common import get_state, print_json_payload
from actlog.core.classify import RULES
from actlog.core.constants import CONFIDENCE_UNKNOWN


def rules_command(ctx: typer.Context) -> None:
    """List classification rules in the order they are tried."""
    state = get_state(ctx)

    rows = [
        {"order": index, "kind": rule.kind.value, "confidence": rule.confidence, "matches": rule.description}
        for index, rule in enumerate(RULES, 1)
    ]
    rows.append(
        {
            "order": len(rows) + 1,
            "kind": "unknown",
            "confidence": CONFIDENCE_UNKNOWN,
            "matches": "fallback when nothing else matches",
        }
    )

    if state.json_output:
        print_json_payload(state, {"rules": rows})
        return

    if state.plain_output:
        for row in rows:
            typer.echo(f"{row['order']}\t{row['kind']}\t{row['confidence']:.2f}\t{row['matches']}")
        return

    table = Table(title="Classification rules (first match wins)")
    table.add_column("#", justify="right")
    table.add_column("Kind")
    table.add_column("Confidence", justify="right")
    table.add_column("Matches")
    for row in rows:
        table.add_row(str(row["order"]), row["kind"], f"{row['confidence']:.2f}", row["matches"])
    state.console.print(table)

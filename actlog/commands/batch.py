"""Parse many utterances from a file or stdin and export them."""

from __future__ import annotations

import json
import sys
from collections import Counter
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
import yaml

from actlog.commands.common import get_state, print_json_payload, result_payload
from actlog.core.config import resolve_output_dir
from actlog.core.models import ParseResult
from actlog.core.parser import parse_raw_input, should_persist
from actlog.exporters.json_export import results_payload, write_json
from actlog.exporters.markdown import write_markdown_log
from actlog.utils.parsing import load_entries
from actlog.utils.text import slugify


def _summary(results: List[ParseResult], min_confidence: float) -> Dict[str, Any]:
    by_kind: Counter = Counter()
    persistable = 0
    for result in results:
        for activity in result.activities:
            by_kind[activity.kind.value] += 1
            if should_persist(activity, min_confidence):
                persistable += 1
    return {
        "entries": len(results),
        "activities": sum(by_kind.values()),
        "persistable": persistable,
        "by_kind": dict(by_kind),
    }


def batch_command(
    ctx: typer.Context,
    file: Optional[Path] = typer.Option(None, help="JSON/YAML/text file with one utterance per entry"),
    stdin: bool = typer.Option(False, "--stdin", help="Read utterances from stdin"),
    output: Optional[Path] = typer.Option(None, help="Export file path"),
    output_dir: Optional[Path] = typer.Option(None, help="Directory for the export when --output is omitted"),
    export_format: Optional[str] = typer.Option(None, "--format", help="Export format: json|markdown"),
    no_split: bool = typer.Option(False, "--no-split", help="Treat each entry as a single activity"),
) -> None:
    """Parse a batch of utterances and write a JSON or markdown log."""
    state = get_state(ctx)

    fmt = export_format or str(state.config.get("export", {}).get("format", "json"))
    if fmt not in {"json", "markdown"}:
        raise typer.BadParameter("--format must be one of: json, markdown")

    stdin_text = sys.stdin.read() if stdin else ""
    try:
        entries = load_entries(file_path=file, read_stdin=stdin, stdin_text=stdin_text)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise typer.BadParameter(f"Could not read input: {exc}")

    if not entries:
        raise typer.BadParameter("Provide --file or --stdin with at least one utterance")

    split = False if no_split else state.split_multiple
    results = [
        parse_raw_input(entry, split=split, food_words=state.food_words)
        for entry in entries
    ]

    if output is None:
        stem = slugify(file.stem) if file else "stdin"
        suffix = "md" if fmt == "markdown" else "json"
        output = resolve_output_dir(state.config, explicit=output_dir) / f"{stem}-activities.{suffix}"

    if fmt == "markdown":
        title = f"Activity Log: {file.name}" if file else "Activity Log"
        path = write_markdown_log(output, results, title=title)
    else:
        path = write_json(output, results_payload(results))

    summary = _summary(results, state.min_confidence)
    payload = {
        "summary": summary,
        "export": {"path": str(path), "format": fmt},
        "entries": [result_payload(result, state.min_confidence) for result in results],
    }

    if state.json_output:
        print_json_payload(state, payload)
        return

    if state.plain_output:
        typer.echo(f"entries\t{summary['entries']}")
        typer.echo(f"activities\t{summary['activities']}")
        typer.echo(f"persistable\t{summary['persistable']}")
        typer.echo(f"export\t{path}")
        return

    state.console.print(
        f"Parsed {summary['entries']} entries into {summary['activities']} activities "
        f"({summary['persistable']} ready to log)"
    )
    for kind, count in sorted(summary["by_kind"].items()):
        state.console.print(f"- {kind}: {count}")
    state.console.print(f"Exported to: {path}")
    if state.verbose:
        state.console.print(json.dumps(summary, indent=2))

"""Markdown activity log export."""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Iterable, List

from actlog.core.models import ParseResult
from actlog.utils.formatting import format_confidence, format_fields


def _cell(value: str) -> str:
    return value.replace("|", "\\|").replace("\n", " ")


def result_rows(result: ParseResult) -> List[str]:
    """Markdown table rows for every activity in one result."""
    when = result.occurred_at.strftime("%Y-%m-%d %H:%M")
    rows: List[str] = []
    for activity in result.activities:
        rows.append(
            f"| {when} | {activity.kind.label} | {_cell(format_fields(activity))} "
            f"| {format_confidence(activity.confidence)} | {_cell(activity.source_text)} |"
        )
    return rows


def results_to_markdown(results: Iterable[ParseResult], title: str = "Activity Log") -> str:
    """Render parse results as a markdown log with a per-kind summary."""
    results = list(results)
    counts: Counter = Counter()
    rows: List[str] = []
    for result in results:
        rows.extend(result_rows(result))
        counts.update(activity.kind.label for activity in result.activities)

    lines = [
        f"# {title}",
        "",
        f"_{len(rows)} activities from {len(results)} entries_",
        "",
        "| When | Kind | Details | Confidence | Source |",
        "|------|------|---------|------------|--------|",
    ]
    lines.extend(rows)

    if counts:
        lines.extend(["", "## Summary", ""])
        for label, count in sorted(counts.items(), key=lambda item: (-item[1], item[0])):
            lines.append(f"- **{label}:** {count}")

    lines.append("")
    return "\n".join(lines)


def write_markdown_log(path: Path, results: Iterable[ParseResult], title: str = "Activity Log") -> Path:
    """Write markdown log and return output path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(results_to_markdown(results, title=title))
    return path

"""JSON export helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable

from actlog.core.models import ParseResult


def results_payload(results: Iterable[ParseResult]) -> Dict[str, Any]:
    """Wrap parse results in the export envelope."""
    entries = [result.to_dict() for result in results]
    return {"count": len(entries), "entries": entries}


def write_json(path: Path, payload: Any) -> Path:
    """Write payload as pretty JSON and return path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2) + "\n")
    return path

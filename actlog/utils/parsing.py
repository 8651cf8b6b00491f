"""Number/unit normalization and batch input loading."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from actlog.core.constants import (
    DISTANCE_UNITS,
    DURATION_MINUTES_PER_UNIT,
    WATER_UNITS,
    WEIGHT_UNITS,
)
from actlog.core.models import ActivityKind, RawInput
from actlog.utils.timestamps import parse_timestamp


def parse_number(raw: str) -> float:
    """Parse a matched numeric literal, keeping integers integral."""
    if "." in raw:
        return float(raw)
    try:
        return int(raw)
    except ValueError:
        # Digit runs past the interpreter's int string limit.
        return float(raw)


def normalize_weight_unit(unit: Optional[str]) -> str:
    """Any k-prefixed unit is kg; missing or pound variants are lbs."""
    if not unit:
        return "lbs"
    token = unit.strip().lower()
    if token.startswith("k"):
        return "kg"
    return WEIGHT_UNITS.get(token, "lbs")


def normalize_water_unit(unit: str) -> str:
    return WATER_UNITS.get(unit.strip().lower(), "oz")


def normalize_distance_unit(unit: str) -> str:
    return DISTANCE_UNITS.get(unit.strip().lower(), "m")


def duration_to_minutes(value: float, unit: str) -> float:
    """Convert a duration to minutes; hour units multiply by 60."""
    factor = DURATION_MINUTES_PER_UNIT.get(unit.strip().lower(), 1)
    return value * factor


def _entry_from_mapping(item: Dict[str, Any]) -> Optional[RawInput]:
    text = item.get("text")
    if not isinstance(text, str) or not text.strip():
        return None

    raw_ts = item.get("occurredAt") or item.get("occurred_at")
    occurred_at = parse_timestamp(str(raw_ts)) if raw_ts else None

    hint = ActivityKind.coerce(item.get("typeHint") or item.get("type"))
    return RawInput(text=text.strip(), occurred_at=occurred_at, type_hint=hint)


def _entries_from_data(raw_data: Any) -> List[RawInput]:
    if isinstance(raw_data, (str, dict)):
        raw_data = [raw_data]
    if not isinstance(raw_data, list):
        return []

    entries: List[RawInput] = []
    for item in raw_data:
        if isinstance(item, str) and item.strip():
            entries.append(RawInput(text=item.strip()))
        elif isinstance(item, dict):
            entry = _entry_from_mapping(item)
            if entry is not None:
                entries.append(entry)
    return entries


def _entries_from_lines(text: str) -> List[RawInput]:
    entries: List[RawInput] = []
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        entries.append(RawInput(text=stripped))
    return entries


def load_entries(file_path: Optional[Path], read_stdin: bool, stdin_text: str = "") -> List[RawInput]:
    """Load utterances from a JSON/YAML/plain-text file or stdin text.

    Structured payloads may be a list of strings or of objects with ``text``,
    ``occurredAt`` and ``typeHint`` keys. Plain text holds one utterance per
    line; blank lines and ``#`` comments are skipped.
    """
    if file_path:
        text = file_path.read_text()
        suffix = file_path.suffix.lower()
        if suffix in {".yaml", ".yml"}:
            return _entries_from_data(yaml.safe_load(text))
        if suffix == ".json":
            return _entries_from_data(json.loads(text))
        return _entries_from_lines(text)

    if read_stdin:
        text = stdin_text.strip()
        if not text:
            return []
        if text[0] in "[{":
            return _entries_from_data(json.loads(text))
        return _entries_from_lines(text)

    return []

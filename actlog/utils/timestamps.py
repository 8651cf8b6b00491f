"""Timestamp parsing, validation and clamping helpers."""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Optional

import typer

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def ensure_aware(value: datetime) -> datetime:
    """Treat naive datetimes as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp or YYYY-MM-DD date into an aware datetime."""
    raw = value.strip()
    if _DATE_RE.match(raw):
        return datetime.strptime(raw, "%Y-%m-%d").replace(tzinfo=timezone.utc)
    if raw.endswith(("Z", "z")):
        raw = raw[:-1] + "+00:00"
    return ensure_aware(datetime.fromisoformat(raw))


def validate_timestamp(value: Optional[str]) -> Optional[str]:
    """Typer callback that validates ISO-8601 timestamp options."""
    if value is None:
        return value
    try:
        parse_timestamp(value)
    except ValueError:
        raise typer.BadParameter(
            f"Invalid timestamp '{value}'. Expected ISO-8601 (e.g. 2026-01-15T07:30:00Z)"
        )
    return value


def clamp_to_now(value: Optional[datetime], now: Optional[datetime] = None) -> datetime:
    """Return ``value`` unless it is absent or lies in the future, else now."""
    current = ensure_aware(now) if now is not None else utc_now()
    if value is None:
        return current
    aware = ensure_aware(value)
    if aware > current:
        return current
    return aware

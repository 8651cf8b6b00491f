"""Formatting helpers used by exports and console output."""

from __future__ import annotations

from typing import List, Optional

from actlog.core.models import (
    ActivityKind,
    CardioFields,
    EnergyFields,
    MoodFields,
    NutritionFields,
    ParsedActivity,
    SleepFields,
    StrengthFields,
    UnknownFields,
    WaterFields,
    WeightFields,
)


def format_number(value: Optional[float]) -> str:
    """Render 5.0 as '5' and 82.5 as '82.5'."""
    if value is None:
        return "N/A"
    if float(value).is_integer():
        return str(int(value))
    return f"{float(value):g}"


def format_minutes(minutes: Optional[float]) -> str:
    """Format minutes as 'H:MM h' past one hour, else 'N min'."""
    if minutes is None:
        return "N/A"
    total = int(round(float(minutes)))
    if total >= 60:
        h, m = divmod(total, 60)
        return f"{h}:{m:02d} h"
    return f"{format_number(minutes)} min"


def format_confidence(confidence: float) -> str:
    return f"{round(confidence * 100)}%"


def format_fields(activity: ParsedActivity) -> str:
    """One-line human summary of an activity's fields."""
    fields = activity.fields

    if isinstance(fields, WeightFields):
        return f"{format_number(fields.value)} {fields.unit}"
    if isinstance(fields, EnergyFields):
        return f"level {fields.level}/10"
    if isinstance(fields, SleepFields):
        return f"{format_number(fields.hours)} hours"
    if isinstance(fields, WaterFields):
        return f"{format_number(fields.amount)} {fields.unit}"
    if isinstance(fields, NutritionFields):
        items = ", ".join(item.name for item in fields.items)
        return f"{fields.meal}: {items}" if fields.meal else items
    if isinstance(fields, CardioFields):
        parts: List[str] = [fields.activity]
        if fields.distance_value is not None:
            parts.append(f"{format_number(fields.distance_value)} {fields.distance_unit}")
        if fields.duration_minutes is not None:
            parts.append(format_minutes(fields.duration_minutes))
        return ", ".join(parts)
    if isinstance(fields, StrengthFields):
        parts = [fields.exercise]
        if fields.sets is not None and fields.reps is not None:
            parts.append(f"{fields.sets}x{fields.reps}")
        elif fields.sets is not None:
            parts.append(f"{fields.sets} sets")
        elif fields.reps is not None:
            parts.append(f"{fields.reps} reps")
        if fields.load is not None:
            parts.append(f"@ {format_number(fields.load)} {fields.load_unit}")
        return " ".join(parts)
    if isinstance(fields, MoodFields):
        return fields.mood
    if isinstance(fields, UnknownFields):
        return fields.text
    return ""


def confirmation_message(activity: ParsedActivity) -> str:
    """Short acknowledgement scaled by confidence, then what was logged."""
    if activity.confidence >= 0.9:
        prefix = "Got it!"
    elif activity.confidence >= 0.7:
        prefix = "Logged!"
    else:
        prefix = "Recorded (let me know if I misunderstood)"

    fields = activity.fields
    kind = activity.kind
    if kind is ActivityKind.CARDIO and isinstance(fields, CardioFields):
        detail = f"{fields.activity.capitalize()} logged."
    elif kind is ActivityKind.STRENGTH and isinstance(fields, StrengthFields):
        detail = f"{fields.exercise.capitalize()} logged."
    elif kind is ActivityKind.NUTRITION and isinstance(fields, NutritionFields):
        detail = f"{(fields.meal or 'meal').capitalize()} recorded."
    elif kind is ActivityKind.WEIGHT and isinstance(fields, WeightFields):
        detail = f"Weight updated to {format_number(fields.value)} {fields.unit}."
    elif kind is ActivityKind.SLEEP and isinstance(fields, SleepFields):
        detail = f"{format_number(fields.hours)} hours of sleep logged."
    elif kind is ActivityKind.WATER and isinstance(fields, WaterFields):
        detail = f"{format_number(fields.amount)} {fields.unit} of water logged."
    elif kind is ActivityKind.ENERGY and isinstance(fields, EnergyFields):
        detail = f"Energy {fields.level}/10 noted."
    elif kind is ActivityKind.MOOD:
        detail = "Mood noted."
    elif kind is ActivityKind.UNKNOWN:
        return "Couldn't tell what that was. Try something like 'ran 5k in 25 minutes'."
    else:
        detail = "Activity logged."
    return f"{prefix} {detail}"

"""Typed records produced by the activity parser."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from actlog.core.constants import KIND_LABELS, KIND_SYNONYMS


class ActivityKind(str, Enum):
    """Closed set of activity categories."""

    WEIGHT = "weight"
    NUTRITION = "nutrition"
    CARDIO = "cardio"
    STRENGTH = "strength"
    SLEEP = "sleep"
    MOOD = "mood"
    ENERGY = "energy"
    WATER = "water"
    UNKNOWN = "unknown"

    @property
    def label(self) -> str:
        return KIND_LABELS[self.value]

    @classmethod
    def coerce(cls, value: Any) -> Optional["ActivityKind"]:
        """Map a kind name or legacy synonym to a member; None if unrecognized."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        key = value.strip().lower()
        key = KIND_SYNONYMS.get(key, key)
        try:
            return cls(key)
        except ValueError:
            return None


def _compact(payload: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in payload.items() if value is not None}


@dataclass(frozen=True)
class WeightFields:
    value: float
    unit: str = "lbs"

    def to_dict(self) -> Dict[str, Any]:
        return {"value": self.value, "unit": self.unit}


@dataclass(frozen=True)
class EnergyFields:
    level: int

    def to_dict(self) -> Dict[str, Any]:
        return {"level": self.level}


@dataclass(frozen=True)
class SleepFields:
    hours: float

    def to_dict(self) -> Dict[str, Any]:
        return {"hours": self.hours}


@dataclass(frozen=True)
class WaterFields:
    amount: float
    unit: str = "oz"

    def to_dict(self) -> Dict[str, Any]:
        return {"amount": self.amount, "unit": self.unit}


@dataclass(frozen=True)
class FoodItem:
    name: str

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name}


@dataclass(frozen=True)
class NutritionFields:
    items: Tuple[FoodItem, ...]
    meal: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact(
            {
                "meal": self.meal,
                "items": [item.to_dict() for item in self.items],
            }
        )


@dataclass(frozen=True)
class CardioFields:
    activity: str
    distance_value: Optional[float] = None
    distance_unit: Optional[str] = None
    duration_minutes: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact(
            {
                "activity": self.activity,
                "distanceValue": self.distance_value,
                "distanceUnit": self.distance_unit,
                "durationMinutes": self.duration_minutes,
            }
        )


@dataclass(frozen=True)
class StrengthFields:
    exercise: str
    sets: Optional[int] = None
    reps: Optional[int] = None
    load: Optional[float] = None
    load_unit: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact(
            {
                "exercise": self.exercise,
                "sets": self.sets,
                "reps": self.reps,
                "load": self.load,
                "loadUnit": self.load_unit,
            }
        )


@dataclass(frozen=True)
class MoodFields:
    mood: str
    notes: str

    def to_dict(self) -> Dict[str, Any]:
        return {"mood": self.mood, "notes": self.notes}


@dataclass(frozen=True)
class UnknownFields:
    text: str

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text}


ActivityFields = Union[
    WeightFields,
    EnergyFields,
    SleepFields,
    WaterFields,
    NutritionFields,
    CardioFields,
    StrengthFields,
    MoodFields,
    UnknownFields,
]


@dataclass(frozen=True)
class ParsedActivity:
    """One classified clause."""

    kind: ActivityKind
    fields: ActivityFields
    confidence: float
    source_text: str
    rank: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "fields": self.fields.to_dict(),
            "confidence": self.confidence,
            "sourceText": self.source_text,
            "rank": self.rank,
        }


@dataclass(frozen=True)
class ParseResult:
    """All activities parsed from one utterance."""

    activities: Tuple[ParsedActivity, ...]
    occurred_at: datetime

    @property
    def primary(self) -> ParsedActivity:
        return self.activities[0]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "activities": [activity.to_dict() for activity in self.activities],
            "occurredAt": self.occurred_at.isoformat(),
        }


@dataclass(frozen=True)
class RawInput:
    """Caller-supplied utterance with optional timestamp and kind hint."""

    text: str
    occurred_at: Optional[datetime] = None
    type_hint: Optional[ActivityKind] = None

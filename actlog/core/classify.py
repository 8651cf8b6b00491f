"""Clause classification: an ordered cascade of pattern rules."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

from actlog.core.constants import (
    CARDIO_RULES,
    CONFIDENCE_CARDIO,
    CONFIDENCE_ENERGY,
    CONFIDENCE_MOOD,
    CONFIDENCE_NUTRITION,
    CONFIDENCE_SLEEP,
    CONFIDENCE_STRENGTH,
    CONFIDENCE_UNKNOWN,
    CONFIDENCE_WATER,
    CONFIDENCE_WEIGHT,
    DEFAULT_MEAL,
    DEFAULT_MOOD,
    DEFAULT_STRENGTH_EXERCISE,
    EATING_VERBS,
    FOOD_WORDS,
    MEAL_PRIORITY,
    MOOD_PRIORITY,
    PLACEHOLDER_FOOD,
    STRENGTH_EXERCISES,
    STRENGTH_VERBS,
)
from actlog.core.models import (
    ActivityFields,
    ActivityKind,
    CardioFields,
    EnergyFields,
    FoodItem,
    MoodFields,
    NutritionFields,
    ParsedActivity,
    SleepFields,
    StrengthFields,
    UnknownFields,
    WaterFields,
    WeightFields,
)
from actlog.utils.parsing import (
    duration_to_minutes,
    normalize_distance_unit,
    normalize_water_unit,
    normalize_weight_unit,
    parse_number,
)
from actlog.utils.text import normalize_whitespace

logger = logging.getLogger(__name__)

_NUMBER = r"(\d+(?:\.\d+)?)"
# Only start a number at the head of a digit run.
_RUN_START = r"(?<![\d.])"
_WEIGHT_UNIT = r"(lbs?|pounds?|kg|kilos?)"

_WEIGHT_RE = re.compile(rf"^(?:weight\s*)?{_NUMBER}\s*{_WEIGHT_UNIT}?$")
_ENERGY_RE = re.compile(r"\benergy\s+(\d+)(?:\s*/\s*10)?")
_SLEEP_RE = re.compile(rf"\b(?:slept|sleep)\s+(?:for\s+)?{_NUMBER}\s*(?:hours?|hrs?)?")
_WATER_RE = re.compile(
    rf"(?:\b(?:drank|had|drink)\s+)?{_RUN_START}{_NUMBER}\s*(oz|ml|cups?|liters?|l)\b(?:\s*(?:of\s+)?water)?"
)
_WATER_WORD_RE = re.compile(r"\bwater\b")
_EATING_RE = re.compile(r"\b(?:" + "|".join(EATING_VERBS) + r")\b")
_DISTANCE_RE = re.compile(rf"{_RUN_START}{_NUMBER}\s*(km|k|miles?|mi|meters?|m)\b")
_DURATION_RE = re.compile(rf"{_RUN_START}{_NUMBER}\s*(minutes?|mins?|hours?|hrs?)\b")
_SETS_OF_REPS_RE = re.compile(r"\b(\d{1,4})\s*sets?\s+of\s+(\d{1,4})\b")
_SETS_X_REPS_RE = re.compile(r"\b(\d{1,4})\s*x\s*(\d{1,4})\b")
_SETS_RE = re.compile(r"\b(\d{1,4})\s*sets?\b")
_REPS_RE = re.compile(r"\b(\d{1,4})\s*reps?\b")
_LOAD_RE = re.compile(rf"{_RUN_START}{_NUMBER}\s*{_WEIGHT_UNIT}\b")
_STRENGTH_VERB_RE = re.compile(r"\b(?:" + "|".join(STRENGTH_VERBS) + r")\b")


def _word_re(word: str) -> "re.Pattern[str]":
    return re.compile(rf"\b{re.escape(word)}\b")


_CARDIO_PATTERNS = [(activity, [_word_re(word) for word in words]) for activity, words in CARDIO_RULES]
_STRENGTH_PATTERNS = [(name, [_word_re(alias) for alias in aliases]) for name, aliases in STRENGTH_EXERCISES]

Matcher = Callable[[str, str, Sequence[str]], Optional[ActivityFields]]


@dataclass(frozen=True)
class Rule:
    """One step of the cascade."""

    kind: ActivityKind
    confidence: float
    description: str
    matcher: Matcher


def _match_weight(text: str, source: str, food_words: Sequence[str]) -> Optional[ActivityFields]:
    match = _WEIGHT_RE.match(text)
    if not match:
        return None
    return WeightFields(value=parse_number(match.group(1)), unit=normalize_weight_unit(match.group(2)))


def _match_energy(text: str, source: str, food_words: Sequence[str]) -> Optional[ActivityFields]:
    match = _ENERGY_RE.search(text)
    if not match:
        return None
    return EnergyFields(level=parse_number(match.group(1)))


def _match_sleep(text: str, source: str, food_words: Sequence[str]) -> Optional[ActivityFields]:
    match = _SLEEP_RE.search(text)
    if not match:
        return None
    return SleepFields(hours=parse_number(match.group(1)))


def _match_water(text: str, source: str, food_words: Sequence[str]) -> Optional[ActivityFields]:
    # Bare quantities ("2 cups rice") need the literal word "water" somewhere.
    if not _WATER_WORD_RE.search(text):
        return None
    match = _WATER_RE.search(text)
    if not match:
        return None
    return WaterFields(amount=parse_number(match.group(1)), unit=normalize_water_unit(match.group(2)))


def _match_nutrition(text: str, source: str, food_words: Sequence[str]) -> Optional[ActivityFields]:
    meals = [meal for meal in MEAL_PRIORITY if meal in text]
    if not meals and not _EATING_RE.search(text):
        return None

    meal = meals[0] if meals else DEFAULT_MEAL
    items = tuple(FoodItem(name=word) for word in food_words if word in text)
    if not items:
        items = (FoodItem(name=PLACEHOLDER_FOOD),)
    return NutritionFields(items=items, meal=meal)


def _match_cardio(text: str, source: str, food_words: Sequence[str]) -> Optional[ActivityFields]:
    activity = None
    for name, patterns in _CARDIO_PATTERNS:
        if any(pattern.search(text) for pattern in patterns):
            activity = name
            break
    if activity is None:
        return None

    distance_value = None
    distance_unit = None
    distance = _DISTANCE_RE.search(text)
    if distance:
        distance_value = parse_number(distance.group(1))
        distance_unit = normalize_distance_unit(distance.group(2))

    duration_minutes = None
    duration = _DURATION_RE.search(text)
    if duration:
        duration_minutes = duration_to_minutes(parse_number(duration.group(1)), duration.group(2))

    return CardioFields(
        activity=activity,
        distance_value=distance_value,
        distance_unit=distance_unit,
        duration_minutes=duration_minutes,
    )


def _match_strength(text: str, source: str, food_words: Sequence[str]) -> Optional[ActivityFields]:
    exercise = None
    for name, patterns in _STRENGTH_PATTERNS:
        if any(pattern.search(text) for pattern in patterns):
            exercise = name
            break

    sets: Optional[int] = None
    reps: Optional[int] = None
    scheme = _SETS_OF_REPS_RE.search(text) or _SETS_X_REPS_RE.search(text)
    if scheme:
        sets, reps = int(scheme.group(1)), int(scheme.group(2))
    else:
        sets_match = _SETS_RE.search(text)
        reps_match = _REPS_RE.search(text)
        sets = int(sets_match.group(1)) if sets_match else None
        reps = int(reps_match.group(1)) if reps_match else None

    has_volume = sets is not None or reps is not None
    if exercise is None and not has_volume and not _STRENGTH_VERB_RE.search(text):
        return None

    load = None
    load_unit = None
    load_match = _LOAD_RE.search(text)
    if load_match:
        load = parse_number(load_match.group(1))
        load_unit = normalize_weight_unit(load_match.group(2))

    return StrengthFields(
        exercise=exercise or DEFAULT_STRENGTH_EXERCISE,
        sets=sets,
        reps=reps,
        load=load,
        load_unit=load_unit,
    )


def _match_mood(text: str, source: str, food_words: Sequence[str]) -> Optional[ActivityFields]:
    # Plain substring, so "feelings" and "feel-good" count.
    if "feel" not in text:
        return None
    mood = next((word for word in MOOD_PRIORITY if word in text), DEFAULT_MOOD)
    return MoodFields(mood=mood, notes=source)


RULES: List[Rule] = [
    Rule(ActivityKind.WEIGHT, CONFIDENCE_WEIGHT, "whole clause is a number with optional weight unit", _match_weight),
    Rule(ActivityKind.ENERGY, CONFIDENCE_ENERGY, "'energy' followed by a level, optional /10", _match_energy),
    Rule(ActivityKind.SLEEP, CONFIDENCE_SLEEP, "'slept'/'sleep' followed by hours", _match_sleep),
    Rule(ActivityKind.WATER, CONFIDENCE_WATER, "volume with oz/ml/cups/liters and the word 'water'", _match_water),
    Rule(ActivityKind.NUTRITION, CONFIDENCE_NUTRITION, "meal keyword or eating verb", _match_nutrition),
    Rule(ActivityKind.CARDIO, CONFIDENCE_CARDIO, "run/walk/cycle verb with optional distance and duration", _match_cardio),
    Rule(ActivityKind.STRENGTH, CONFIDENCE_STRENGTH, "lift name, sets/reps or lifting verb", _match_strength),
    Rule(ActivityKind.MOOD, CONFIDENCE_MOOD, "'feel' anywhere in the clause, mood word picked by priority", _match_mood),
]

_RULES_BY_KIND: Dict[ActivityKind, Rule] = {rule.kind: rule for rule in RULES}


def _apply(rule: Rule, text: str, source: str, food_words: Sequence[str], rank: int) -> Optional[ParsedActivity]:
    fields = rule.matcher(text, source, food_words)
    if fields is None:
        return None
    return ParsedActivity(
        kind=rule.kind,
        fields=fields,
        confidence=rule.confidence,
        source_text=source,
        rank=rank,
    )


def classify_clause(
    clause: str,
    type_hint: Any = None,
    rank: int = 0,
    food_words: Sequence[str] = FOOD_WORDS,
) -> ParsedActivity:
    """Classify one clause; first matching rule wins, unknown otherwise.

    A type hint is honored only when the hinted rule matches the clause on its
    own. An incompatible or unrecognized hint is ignored. A matching hint wins
    over cascade order, so a hinted later rule beats an earlier one.
    """
    source = clause.strip()
    text = normalize_whitespace(source).lower()

    hint = ActivityKind.coerce(type_hint) if type_hint is not None else None
    if hint is not None and hint in _RULES_BY_KIND:
        hinted = _apply(_RULES_BY_KIND[hint], text, source, food_words, rank)
        if hinted is not None:
            logger.debug("type hint %s accepted for %r", hint.value, source)
            return hinted
        logger.debug("type hint %s incompatible with %r, ignoring", hint.value, source)

    for rule in RULES:
        parsed = _apply(rule, text, source, food_words, rank)
        if parsed is not None:
            logger.debug("rule %s matched %r", rule.kind.value, source)
            return parsed

    logger.debug("no rule matched %r", source)
    return ParsedActivity(
        kind=ActivityKind.UNKNOWN,
        fields=UnknownFields(text=source),
        confidence=CONFIDENCE_UNKNOWN,
        source_text=source,
        rank=rank,
    )


def food_words_from_config(config: Dict[str, Any]) -> List[str]:
    """Default nutrition vocabulary extended with configured words."""
    configured = config.get("parser", {}).get("food_words", [])
    words = list(FOOD_WORDS)
    if isinstance(configured, list):
        for item in configured:
            word = str(item).strip().lower()
            if word and word not in words:
                words.append(word)
    return words

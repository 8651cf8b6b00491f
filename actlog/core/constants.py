"""Static vocabularies, unit tables and rule confidences."""

from __future__ import annotations

CONFIDENCE_WEIGHT = 0.95
CONFIDENCE_ENERGY = 0.95
CONFIDENCE_SLEEP = 0.95
CONFIDENCE_WATER = 0.9
CONFIDENCE_NUTRITION = 0.85
CONFIDENCE_CARDIO = 0.85
CONFIDENCE_STRENGTH = 0.85
CONFIDENCE_MOOD = 0.8
CONFIDENCE_UNKNOWN = 0.1

DEFAULT_MIN_CONFIDENCE = 0.6

# Priority order matters: first present keyword wins.
MEAL_PRIORITY = ["breakfast", "lunch", "dinner", "snack"]
DEFAULT_MEAL = "snack"
EATING_VERBS = ["ate", "eat", "eating", "eaten"]

FOOD_WORDS = [
    "eggs",
    "toast",
    "chicken",
    "salad",
    "steak",
    "vegetables",
    "apple",
    "banana",
]
PLACEHOLDER_FOOD = "meal"

CARDIO_RULES = [
    ("running", ["ran", "run", "running"]),
    ("walking", ["walked", "walking"]),
    ("cycling", ["cycled", "cycling"]),
]

STRENGTH_EXERCISES = [
    ("bench press", ["bench press", "bench pressed", "benched"]),
    ("overhead press", ["overhead press", "shoulder press", "ohp"]),
    ("deadlift", ["deadlifts", "deadlifted", "deadlift"]),
    ("squat", ["squats", "squatted", "squat"]),
    ("pull-up", ["pull-ups", "pullups", "pull ups", "pull-up", "pullup"]),
    ("push-up", ["push-ups", "pushups", "push ups", "push-up", "pushup"]),
    ("curl", ["bicep curls", "curls", "curl"]),
    ("lunge", ["lunges", "lunge"]),
]
DEFAULT_STRENGTH_EXERCISE = "lifting"
STRENGTH_VERBS = ["lifted", "lifting", "lift"]

MOOD_PRIORITY = ["great", "good", "bad", "terrible", "tired"]
DEFAULT_MOOD = "okay"

WEIGHT_UNITS = {"lb": "lbs", "lbs": "lbs", "pound": "lbs", "pounds": "lbs"}
WATER_UNITS = {
    "liter": "liters",
    "liters": "liters",
    "l": "liters",
    "cup": "cups",
    "cups": "cups",
    "ml": "ml",
    "oz": "oz",
}
DISTANCE_UNITS = {
    "k": "km",
    "km": "km",
    "mi": "miles",
    "mile": "miles",
    "miles": "miles",
    "meter": "m",
    "meters": "m",
    "m": "m",
}
DURATION_MINUTES_PER_UNIT = {
    "min": 1,
    "mins": 1,
    "minute": 1,
    "minutes": 1,
    "hr": 60,
    "hrs": 60,
    "hour": 60,
    "hours": 60,
}

KIND_SYNONYMS = {
    "food": "nutrition",
    "meal": "nutrition",
    "workout": "cardio",
    "exercise": "cardio",
    "lifting": "strength",
    "hydration": "water",
    "bodyweight": "weight",
}

KIND_LABELS = {
    "weight": "Weight",
    "nutrition": "Nutrition",
    "cardio": "Cardio",
    "strength": "Strength",
    "sleep": "Sleep",
    "mood": "Mood",
    "energy": "Energy",
    "water": "Water",
    "unknown": "Unknown",
}

"""Per-invocation CLI state."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from rich.console import Console

from actlog.core.constants import DEFAULT_MIN_CONFIDENCE, FOOD_WORDS


@dataclass
class CLIState:
    """Output mode, loaded config and the parser settings derived from it."""

    json_output: bool
    plain_output: bool
    verbose: bool
    quiet: bool
    config_path: Path
    config: Dict[str, Any]
    console: Console
    split_multiple: bool = True
    min_confidence: float = DEFAULT_MIN_CONFIDENCE
    food_words: List[str] = field(default_factory=lambda: list(FOOD_WORDS))

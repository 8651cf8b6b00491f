"""Configuration loading and parser settings."""

from __future__ import annotations

import copy
import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # Python 3.9-3.10
    import tomli as tomllib  # type: ignore[no-redef]

from actlog.core.classify import food_words_from_config
from actlog.core.constants import DEFAULT_MIN_CONFIDENCE

CONFIG_ENV = "ACTLOG_CONFIG_FILE"
OUTPUT_DIR_ENV = "ACTLOG_OUTPUT_DIR"
DEFAULT_CONFIG_FILE = "~/.config/actlog/config.toml"
DEFAULT_EXPORT_DIR = "./activity-logs"
OUTPUT_MODES = ("pretty", "json", "plain")


class ConfigError(RuntimeError):
    """Raised when the config file is unreadable or holds bad values."""


@dataclass(frozen=True)
class ParserSettings:
    split_multiple: bool
    min_confidence: float
    food_words: List[str]


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def expand_path(path_str: str) -> Path:
    """Expand ~ and $VARS, then resolve."""
    return Path(os.path.expandvars(path_str)).expanduser().resolve()


def default_config_path() -> Path:
    return expand_path(os.getenv(CONFIG_ENV, DEFAULT_CONFIG_FILE))


def _default_config() -> Dict[str, Any]:
    return {
        "parser": {
            "split_multiple": True,
            "min_confidence": DEFAULT_MIN_CONFIDENCE,
            "food_words": [],
        },
        "defaults": {"output_format": "pretty"},
        "export": {
            "default_directory": DEFAULT_EXPORT_DIR,
            "format": "json",
        },
    }


def _read_config(path: Path) -> Dict[str, Any]:
    # Anything that is not .json is read as TOML, including suffix-less files.
    is_json = path.suffix.lower() == ".json"
    text = path.read_text()
    try:
        loaded = json.loads(text) if is_json else tomllib.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in config file {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in config file {path}: {exc}") from exc

    if not isinstance(loaded, dict):
        raise ConfigError(f"Config file {path} must contain an object/table at the root")
    return loaded


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load the config file (if present) over the built-in defaults."""
    cfg_path = path or default_config_path()
    if not cfg_path.exists():
        return _default_config()
    return _deep_merge(_default_config(), _read_config(cfg_path))


def min_confidence_from_config(config: Dict[str, Any]) -> float:
    """Persistence threshold from config, clamped to [0, 1]."""
    raw = config.get("parser", {}).get("min_confidence", DEFAULT_MIN_CONFIDENCE)
    if isinstance(raw, bool):
        raise ConfigError(f"parser.min_confidence must be a number, got {raw!r}")
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise ConfigError(f"parser.min_confidence must be a number, got {raw!r}")
    return min(max(value, 0.0), 1.0)


def output_mode_from_config(config: Dict[str, Any]) -> str:
    mode = str(config.get("defaults", {}).get("output_format", "pretty")).strip().lower()
    if mode not in OUTPUT_MODES:
        raise ConfigError(f"defaults.output_format must be one of {', '.join(OUTPUT_MODES)}, got {mode!r}")
    return mode


def parser_settings(config: Dict[str, Any]) -> ParserSettings:
    """Validated parser options from the ``[parser]`` table."""
    parser_cfg = config.get("parser", {})
    if not isinstance(parser_cfg, dict):
        raise ConfigError("[parser] must be a table")

    split = parser_cfg.get("split_multiple", True)
    if not isinstance(split, bool):
        raise ConfigError(f"parser.split_multiple must be true or false, got {split!r}")

    food_words = parser_cfg.get("food_words", [])
    if not isinstance(food_words, list):
        raise ConfigError("parser.food_words must be a list of words")

    return ParserSettings(
        split_multiple=split,
        min_confidence=min_confidence_from_config(config),
        food_words=food_words_from_config(config),
    )


def resolve_output_dir(config: Dict[str, Any], explicit: Optional[Path] = None) -> Path:
    """Export directory: explicit path, then $ACTLOG_OUTPUT_DIR, then config."""
    if explicit is not None:
        return explicit.expanduser().resolve()
    env_dir = os.getenv(OUTPUT_DIR_ENV)
    if env_dir:
        return expand_path(env_dir)
    return expand_path(config.get("export", {}).get("default_directory", DEFAULT_EXPORT_DIR))

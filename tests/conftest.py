from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    path = tmp_path / "config" / "missing.toml"
    monkeypatch.setenv("ACTLOG_CONFIG_FILE", str(path))
    monkeypatch.setenv("ACTLOG_OUTPUT_DIR", str(tmp_path / "exports"))
    return path


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def fixed_now() -> datetime:
    return datetime(2026, 2, 14, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def sample_utterances() -> list:
    return [
        "weight 175 lbs",
        "ran 5k in 25 minutes",
        "had eggs and toast for breakfast",
        "drank 64 oz water",
        "feeling great today",
        "purple elephants dance",
    ]


@pytest.fixture()
def write_temp_json(tmp_path: Path):
    def _write(name: str, payload: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload, indent=2) + "\n")
        return path

    return _write


@pytest.fixture()
def write_temp_text(tmp_path: Path):
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content.strip() + "\n")
        return path

    return _write

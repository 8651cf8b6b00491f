from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from actlog.__main__ import app


def test_parse_json_output(runner) -> None:
    result = runner.invoke(app, ["--json", "parse", "weight 175, ran 5k in 25 minutes"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    kinds = [activity["kind"] for activity in payload["activities"]]
    assert kinds == ["weight", "cardio"]
    assert payload["activities"][0]["fields"] == {"value": 175, "unit": "lbs"}
    assert payload["activities"][1]["fields"]["durationMinutes"] == 25
    assert all(activity["persist"] for activity in payload["activities"])


def test_parse_joins_unquoted_words(runner) -> None:
    result = runner.invoke(app, ["--json", "parse", "slept", "8", "hours"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["activities"][0]["fields"] == {"hours": 8}


def test_parse_plain_output(runner) -> None:
    result = runner.invoke(app, ["--plain", "parse", "weight 175; purple elephants"])
    assert result.exit_code == 0
    lines = result.stdout.strip().splitlines()
    assert lines[0].startswith("occurred_at\t")
    assert lines[1] == "0\tweight\t0.95\t175 lbs\tpersist"
    assert lines[2] == "1\tunknown\t0.10\tpurple elephants\tskip"


def test_parse_pretty_output(runner) -> None:
    result = runner.invoke(app, ["parse", "ran 5k and slept 8 hours"])
    assert result.exit_code == 0
    assert "Parsed 2 activities" in result.stdout
    assert "Logged! Running logged." in result.stdout
    assert "Got it! 8 hours of sleep logged." in result.stdout


def test_parse_no_split(runner) -> None:
    result = runner.invoke(app, ["--json", "parse", "--no-split", "had eggs and toast for breakfast"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert len(payload["activities"]) == 1
    assert payload["activities"][0]["fields"]["items"] == [{"name": "eggs"}, {"name": "toast"}]


def test_parse_type_hint(runner) -> None:
    result = runner.invoke(app, ["--json", "parse", "--type", "mood", "feeling tired after running"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["activities"][0]["kind"] == "mood"


def test_parse_unknown_type_is_usage_error(runner) -> None:
    result = runner.invoke(app, ["parse", "--type", "banana", "175"])
    assert result.exit_code == 2


def test_parse_blank_text_is_usage_error(runner) -> None:
    result = runner.invoke(app, ["parse", "   "])
    assert result.exit_code == 2


def test_parse_invalid_timestamp_is_usage_error(runner) -> None:
    result = runner.invoke(app, ["parse", "--at", "yesterday", "175"])
    assert result.exit_code == 2


def test_parse_future_timestamp_is_clamped(runner) -> None:
    result = runner.invoke(app, ["--json", "parse", "--at", "2999-01-01T00:00:00Z", "175"])
    assert result.exit_code == 0
    occurred_at = datetime.fromisoformat(json.loads(result.stdout)["occurredAt"])
    assert occurred_at <= datetime.now(timezone.utc)


def test_parse_past_timestamp_is_kept(runner) -> None:
    result = runner.invoke(app, ["--json", "parse", "--at", "2026-01-15T07:30:00Z", "175"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["occurredAt"] == "2026-01-15T07:30:00+00:00"


def test_parse_min_confidence_override(runner) -> None:
    result = runner.invoke(app, ["--json", "parse", "--min-confidence", "0.9", "feeling good"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["activities"][0]["persist"] is False


def test_parse_respects_config(runner, tmp_path: Path) -> None:
    config = tmp_path / "actlog.toml"
    config.write_text('[parser]\nsplit_multiple = false\nfood_words = ["pizza"]\n')
    result = runner.invoke(app, ["--json", "--config", str(config), "parse", "ate pizza and salad for lunch"])
    assert result.exit_code == 0
    activities = json.loads(result.stdout)["activities"]
    assert len(activities) == 1
    assert [item["name"] for item in activities[0]["fields"]["items"]] == ["salad", "pizza"]


def test_invalid_config_exits_with_usage_code(runner, tmp_path: Path) -> None:
    config = tmp_path / "broken.json"
    config.write_text("{broken")
    result = runner.invoke(app, ["--config", str(config), "parse", "175"])
    assert result.exit_code == 2
    assert "Config error" in result.stdout


def test_batch_json_file(runner, write_temp_json, tmp_path: Path) -> None:
    source = write_temp_json(
        "week.json",
        [
            {"text": "weight 175", "occurredAt": "2026-02-10T07:00:00Z"},
            {"text": "175", "typeHint": "weight"},
            "ran 5k, feeling great",
            "purple elephants",
        ],
    )
    output = tmp_path / "out" / "log.json"
    result = runner.invoke(app, ["--json", "batch", "--file", str(source), "--output", str(output)])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["summary"]["entries"] == 4
    assert payload["summary"]["activities"] == 5
    assert payload["summary"]["persistable"] == 4
    assert payload["summary"]["by_kind"]["weight"] == 2
    assert payload["export"] == {"path": str(output), "format": "json"}

    exported = json.loads(output.read_text())
    assert exported["count"] == 4
    assert exported["entries"][0]["occurredAt"] == "2026-02-10T07:00:00+00:00"


def test_batch_markdown_default_output_dir(runner, write_temp_text, tmp_path: Path) -> None:
    source = write_temp_text("Morning Notes.txt", "weight 175\n# skip me\ndrank 64 oz water\n")
    result = runner.invoke(app, ["--plain", "batch", "--file", str(source), "--format", "markdown"])
    assert result.exit_code == 0
    expected = tmp_path / "exports" / "morning-notes-activities.md"
    assert f"export\t{expected.resolve()}" in result.stdout
    assert "entries\t2" in result.stdout
    text = expected.read_text()
    assert text.startswith("# Activity Log: Morning Notes.txt")
    assert "- **Water:** 1" in text


def test_batch_stdin(runner, tmp_path: Path) -> None:
    result = runner.invoke(
        app,
        ["batch", "--stdin", "--output-dir", str(tmp_path / "logs")],
        input="ran 5k\nslept 8 hours\n",
    )
    assert result.exit_code == 0
    assert "Parsed 2 entries into 2 activities (2 ready to log)" in result.stdout
    assert "Exported to:" in result.stdout
    assert (tmp_path / "logs" / "stdin-activities.json").exists()


def test_batch_without_input_is_usage_error(runner) -> None:
    result = runner.invoke(app, ["batch"])
    assert result.exit_code == 2


def test_batch_rejects_unknown_format(runner, write_temp_text) -> None:
    source = write_temp_text("log.txt", "ran 5k")
    result = runner.invoke(app, ["batch", "--file", str(source), "--format", "csv"])
    assert result.exit_code == 2


def test_batch_bad_json_is_usage_error(runner, tmp_path: Path) -> None:
    source = tmp_path / "broken.json"
    source.write_text("[{")
    result = runner.invoke(app, ["batch", "--file", str(source)])
    assert result.exit_code == 2


def test_rules_plain_lists_cascade(runner) -> None:
    result = runner.invoke(app, ["--plain", "rules"])
    assert result.exit_code == 0
    kinds = [line.split("\t")[1] for line in result.stdout.strip().splitlines()]
    assert kinds == ["weight", "energy", "sleep", "water", "nutrition", "cardio", "strength", "mood", "unknown"]


def test_rules_json(runner) -> None:
    result = runner.invoke(app, ["--json", "rules"])
    assert result.exit_code == 0
    rules = json.loads(result.stdout)["rules"]
    assert rules[0] == {
        "order": 1,
        "kind": "weight",
        "confidence": 0.95,
        "matches": "whole clause is a number with optional weight unit",
    }
    assert rules[-1]["kind"] == "unknown"


def test_configured_default_output_format(runner, tmp_path: Path) -> None:
    config = tmp_path / "actlog.toml"
    config.write_text('[defaults]\noutput_format = "plain"\n')
    result = runner.invoke(app, ["--config", str(config), "parse", "175"])
    assert result.exit_code == 0
    assert "0\tweight\t0.95\t175 lbs\tpersist" in result.stdout

    result = runner.invoke(app, ["--config", str(config), "--json", "parse", "175"])
    assert json.loads(result.stdout)["activities"][0]["kind"] == "weight"


def test_parse_min_confidence_out_of_range_is_usage_error(runner) -> None:
    result = runner.invoke(app, ["parse", "--min-confidence", "1.5", "175"])
    assert result.exit_code == 2


def test_parse_pretty_single_activity_message(runner) -> None:
    result = runner.invoke(app, ["parse", "weight 175"])
    assert result.exit_code == 0
    assert "Got it! Weight updated to 175 lbs." in result.stdout
    assert "0: Got it!" not in result.stdout


def test_parse_pretty_numbers_messages_for_several_activities(runner) -> None:
    result = runner.invoke(app, ["parse", "ran 5k and slept 8 hours"])
    assert "0: Logged! Running logged." in result.stdout
    assert "1: Got it! 8 hours of sleep logged." in result.stdout

from __future__ import annotations

import json
from pathlib import Path

import pytest

from configset.observability.logging import LogMessage
from configset.observability.sinks import JsonlLogSink, MemoryLogSink, StdoutLogSink


def test_stdout_sink_filters_below_min_level(capsys: pytest.CaptureFixture[str]) -> None:
    sink = StdoutLogSink(min_level="warning")
    sink.emit(LogMessage(level="info", message="quiet"))
    sink.emit(LogMessage(level="error", message="loud", fields={"path": Path("a.yml")}))
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 1
    payload = json.loads(lines[0])
    assert payload["message"] == "loud"
    # Non-JSON field values fall back to their string form.
    assert payload["fields"] == {"path": "a.yml"}


def test_stdout_sink_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        StdoutLogSink(min_level="verbose")


def test_jsonl_sink_appends_one_record_per_line(tmp_path: Path) -> None:
    path = tmp_path / "logs" / "configset.jsonl"
    with JsonlLogSink(path) as sink:
        sink.emit(LogMessage(level="debug", message="config loaded"))
        sink.emit(LogMessage(level="warning", message="config field skipped"))
    records = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
    assert [record["level"] for record in records] == ["debug", "warning"]


def test_memory_sink_groups_by_level() -> None:
    sink = MemoryLogSink()
    sink.emit(LogMessage(level="debug", message="a"))
    sink.emit(LogMessage(level="warning", message="b"))
    assert [record.message for record in sink.by_level("warning")] == ["b"]


def test_jsonl_sink_honours_min_level_and_appends_across_sessions(tmp_path: Path) -> None:
    path = tmp_path / "configset.jsonl"
    with JsonlLogSink(path, min_level="warning") as sink:
        sink.emit(LogMessage(level="debug", message="config loaded"))
        sink.emit(LogMessage(level="warning", message="config field skipped"))
    with JsonlLogSink(path) as sink:
        assert sink.path == path
        sink.emit(LogMessage(level="debug", message="config loaded"))
    messages = [json.loads(line)["message"] for line in path.read_text(encoding="utf-8").splitlines()]
    assert messages == ["config field skipped", "config loaded"]


def test_jsonl_sink_rejects_unknown_level(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        JsonlLogSink(tmp_path / "x.jsonl", min_level="trace")

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from configset.observability.logging import LogMessage, emit_log
from configset.observability.sinks import MemoryLogSink


def test_log_message_requires_known_level_and_message() -> None:
    # Records are structured but still require explicit semantic basics.
    with pytest.raises(ValueError):
        LogMessage(level="", message="loaded")
    with pytest.raises(ValueError):
        LogMessage(level="trace", message="loaded")
    with pytest.raises(ValueError):
        LogMessage(level="info", message="")


def test_log_message_to_dict_uses_utc_z_suffix() -> None:
    record = LogMessage(
        level="debug",
        message="config loaded",
        timestamp=datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC),
        fields={"prefix": "db"},
    )
    assert record.to_dict() == {
        "level": "debug",
        "message": "config loaded",
        "timestamp": "2024-01-02T03:04:05Z",
        "fields": {"prefix": "db"},
    }


def test_emit_log_without_sink_is_a_no_op() -> None:
    emit_log(None, "info", "dropped")


def test_emit_log_passes_keyword_fields() -> None:
    sink = MemoryLogSink()
    emit_log(sink, "warning", "config field skipped", field="port")
    [record] = sink.records
    assert record.level == "warning"
    assert record.fields == {"field": "port"}

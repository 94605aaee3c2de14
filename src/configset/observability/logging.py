from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol

LOG_LEVELS = ("debug", "info", "warning", "error")


@dataclass(frozen=True, slots=True)
class LogMessage:
    # Structured diagnostic record for loads, merges and absorbed decode failures.
    level: str
    message: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=UTC))
    fields: dict[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.level not in LOG_LEVELS:
            raise ValueError(f"LogMessage level must be one of: {list(LOG_LEVELS)}")
        if not self.message:
            raise ValueError("LogMessage requires a non-empty message")

    def to_dict(self) -> dict[str, object]:
        return {
            "level": self.level,
            "message": self.message,
            "timestamp": self.timestamp.isoformat().replace("+00:00", "Z"),
            "fields": self.fields,
        }


class LogSink(Protocol):
    def emit(self, message: LogMessage) -> None: ...


def emit_log(sink: LogSink | None, level: str, message: str, **fields: object) -> None:
    # No sink configured means diagnostics are dropped.
    if sink is None:
        return
    sink.emit(LogMessage(level=level, message=message, fields=fields))

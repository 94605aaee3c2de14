from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from configset.observability.logging import LOG_LEVELS, LogMessage


class _LevelFilter:
    # Records below min_level are dropped before they reach the writer.
    def __init__(self, min_level: str) -> None:
        if min_level not in LOG_LEVELS:
            raise ValueError(f"min_level must be one of: {list(LOG_LEVELS)}")
        self._threshold = LOG_LEVELS.index(min_level)

    def accepts(self, message: LogMessage) -> bool:
        return LOG_LEVELS.index(message.level) >= self._threshold


class StdoutLogSink(_LevelFilter):
    # One compact JSON object per line.
    def __init__(self, *, min_level: str = "info") -> None:
        super().__init__(min_level)

    def emit(self, message: LogMessage) -> None:
        if self.accepts(message):
            print(_encode(message))


class JsonlLogSink(_LevelFilter):
    # Appends to a diagnostics file kept next to the config; debug records are kept by default.
    def __init__(self, path: Path, *, min_level: str = "debug") -> None:
        super().__init__(min_level)
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self._path.open("a", encoding="utf-8")

    @property
    def path(self) -> Path:
        return self._path

    def emit(self, message: LogMessage) -> None:
        if not self.accepts(message):
            return
        self._file.write(_encode(message) + "\n")
        self._file.flush()

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> JsonlLogSink:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


@dataclass
class MemoryLogSink:
    # Keeps records in memory; handy for tests and for surfacing skipped fields.
    records: list[LogMessage] = field(default_factory=list)

    def emit(self, message: LogMessage) -> None:
        self.records.append(message)

    def by_level(self, level: str) -> list[LogMessage]:
        return [record for record in self.records if record.level == level]


def _encode(message: LogMessage) -> str:
    # Field values may hold arbitrary objects (paths, types); fall back to str().
    return json.dumps(message.to_dict(), separators=(",", ":"), ensure_ascii=False, default=str)

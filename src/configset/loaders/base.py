from __future__ import annotations

from pathlib import Path
from typing import IO, Protocol, Self, runtime_checkable

from configset.errors import SourceReadError

# Source containers collect parsed values and errors; nothing here raises into the caller.


@runtime_checkable
class SourceContainer(Protocol):
    # Anything ConfigSet.load accepts: parsed values plus the errors met while producing them.
    def get(self) -> list[object]:
        raise NotImplementedError

    def errors(self) -> list[Exception]:
        raise NotImplementedError


class Source:
    # Shared chainable plumbing; subclasses only supply the parser.
    format_name = "config"

    def __init__(self) -> None:
        self._values: list[object] = []
        self._errors: list[Exception] = []

    def get(self) -> list[object]:
        return list(self._values)

    def errors(self) -> list[Exception]:
        return list(self._errors)

    def from_file(self, path: str | Path) -> Self:
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            self._record(f"cannot open {self.format_name} file {str(path)!r}: {exc}", exc)
            return self
        return self.from_bytes(data)

    def from_str(self, text: str) -> Self:
        return self.from_bytes(text.encode("utf-8"))

    def from_bytes(self, data: bytes) -> Self:
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            self._record(f"cannot read {self.format_name} data: {exc}", exc)
            return self
        self._parse_into(text)
        return self

    def from_reader(self, reader: IO[str] | IO[bytes] | None) -> Self:
        if reader is None:
            self._record(f"cannot read {self.format_name} data: no reader given")
            return self
        try:
            data = reader.read()
        except OSError as exc:
            self._record(f"cannot read {self.format_name} data: {exc}", exc)
            return self
        if isinstance(data, str):
            self._parse_into(data)
            return self
        return self.from_bytes(data)

    def _parse_into(self, text: str) -> None:
        if not text.strip():
            return
        try:
            values = self._parse(text)
        except ValueError as exc:
            self._record(f"cannot parse {self.format_name} data: {exc}", exc)
            return
        self._values.extend(values)

    def _parse(self, text: str) -> list[object]:
        raise NotImplementedError

    def _record(self, message: str, cause: Exception | None = None) -> None:
        error = SourceReadError(message)
        error.__cause__ = cause
        self._errors.append(error)

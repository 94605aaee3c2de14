from __future__ import annotations

from pathlib import Path
from typing import IO

from configset.decode.engine import DecodeEngine
from configset.decode.tags import DEFAULT_TAG
from configset.errors import SourceLoadError
from configset.loaders.base import SourceContainer
from configset.loaders.env_source import EnvSource
from configset.loaders.json_source import JsonSource
from configset.loaders.toml_source import TomlSource
from configset.loaders.yaml_source import YamlSource
from configset.observability.logging import LogSink, emit_log
from configset.options import ConfigSetOptions, DecodeOptions, LoadOptions
from configset.store.value_store import NO_PREFIX, ValueStore


class ConfigSet:
    # Layered config: sources merge into one generic tree, dataclass targets decode out of it.
    def __init__(self, *, tag: str = DEFAULT_TAG, log_sink: LogSink | None = None) -> None:
        options = ConfigSetOptions(tag=tag)
        self._tag = options.tag
        self._log_sink = log_sink
        self._store = ValueStore()
        self._engine = DecodeEngine(tag=options.tag, log_sink=log_sink)

    @property
    def tag(self) -> str:
        return self._tag

    def get(self, path: str = "") -> object:
        return self._store.get(path)

    def load(self, container: SourceContainer, *, prefix: str = NO_PREFIX) -> None:
        options = LoadOptions(prefix=prefix)
        errors = container.errors()
        if errors:
            # Nothing is merged when the container met any error.
            raise SourceLoadError(errors)
        values = container.get()
        self._store.merge_all(values, prefix=options.prefix)
        emit_log(
            self._log_sink,
            "debug",
            "config loaded",
            source=type(container).__name__,
            values=len(values),
            prefix=options.prefix,
        )

    def load_raw(self, value: object, *, prefix: str = NO_PREFIX) -> None:
        options = LoadOptions(prefix=prefix)
        self._store.merge(value, prefix=options.prefix)
        emit_log(self._log_sink, "debug", "config loaded", source="raw", values=1, prefix=options.prefix)

    # JSON

    def load_json_file(self, path: str | Path, *, prefix: str = NO_PREFIX) -> None:
        self.load(JsonSource().from_file(path), prefix=prefix)

    def load_json_str(self, text: str, *, prefix: str = NO_PREFIX) -> None:
        self.load(JsonSource().from_str(text), prefix=prefix)

    def load_json_bytes(self, data: bytes, *, prefix: str = NO_PREFIX) -> None:
        self.load(JsonSource().from_bytes(data), prefix=prefix)

    def load_json_reader(self, reader: IO[str] | IO[bytes], *, prefix: str = NO_PREFIX) -> None:
        self.load(JsonSource().from_reader(reader), prefix=prefix)

    # YAML

    def load_yaml_file(self, path: str | Path, *, prefix: str = NO_PREFIX) -> None:
        self.load(YamlSource().from_file(path), prefix=prefix)

    def load_yaml_str(self, text: str, *, prefix: str = NO_PREFIX) -> None:
        self.load(YamlSource().from_str(text), prefix=prefix)

    def load_yaml_bytes(self, data: bytes, *, prefix: str = NO_PREFIX) -> None:
        self.load(YamlSource().from_bytes(data), prefix=prefix)

    def load_yaml_reader(self, reader: IO[str] | IO[bytes], *, prefix: str = NO_PREFIX) -> None:
        self.load(YamlSource().from_reader(reader), prefix=prefix)

    # TOML

    def load_toml_file(self, path: str | Path, *, prefix: str = NO_PREFIX) -> None:
        self.load(TomlSource().from_file(path), prefix=prefix)

    def load_toml_str(self, text: str, *, prefix: str = NO_PREFIX) -> None:
        self.load(TomlSource().from_str(text), prefix=prefix)

    def load_toml_bytes(self, data: bytes, *, prefix: str = NO_PREFIX) -> None:
        self.load(TomlSource().from_bytes(data), prefix=prefix)

    def load_toml_reader(self, reader: IO[str] | IO[bytes], *, prefix: str = NO_PREFIX) -> None:
        self.load(TomlSource().from_reader(reader), prefix=prefix)

    # Env

    def load_env_file(self, path: str | Path, *, prefix: str = NO_PREFIX) -> None:
        self.load(EnvSource().from_file(path), prefix=prefix)

    def load_env_str(self, text: str, *, prefix: str = NO_PREFIX) -> None:
        self.load(EnvSource().from_str(text), prefix=prefix)

    def load_env_bytes(self, data: bytes, *, prefix: str = NO_PREFIX) -> None:
        self.load(EnvSource().from_bytes(data), prefix=prefix)

    def load_env_reader(self, reader: IO[str] | IO[bytes], *, prefix: str = NO_PREFIX) -> None:
        self.load(EnvSource().from_reader(reader), prefix=prefix)

    def load_env_from_environment(self, *, prefix: str = NO_PREFIX) -> None:
        self.load(EnvSource().from_environment(), prefix=prefix)

    # Decode

    def decode(self, target: object, *, strict: bool = False, prefix: str = "") -> int:
        # Returns how many leaf fields were populated; zero raises NoFieldsSetError.
        options = DecodeOptions(strict=strict, prefix=prefix)
        return self._engine.decode(target, self._store.root, strict=options.strict, prefix=options.prefix)

    def strict_decode(self, target: object, *, prefix: str = "") -> int:
        return self.decode(target, strict=True, prefix=prefix)

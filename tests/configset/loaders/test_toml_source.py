from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from configset.loaders.toml_source import TomlSource

DOCUMENT = """
title = "demo"

[server]
host = "localhost"
ports = [8080, 8081]
started = 2024-01-02T03:04:05Z
"""


def test_toml_file_parses_tables_and_datetimes(tmp_path: Path) -> None:
    path = tmp_path / "cfg.toml"
    path.write_text(DOCUMENT, encoding="utf-8")
    [value] = TomlSource().from_file(path).get()
    assert value["title"] == "demo"
    assert value["server"]["ports"] == [8080, 8081]
    assert value["server"]["started"] == datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def test_toml_parse_error_is_recorded() -> None:
    source = TomlSource().from_str("key = = value")
    assert len(source.errors()) == 1
    assert source.get() == []

from __future__ import annotations

import io
from pathlib import Path

from configset.errors import SourceReadError
from configset.loaders.json_source import JsonSource


def test_json_sources_from_every_input(tmp_path: Path) -> None:
    path = tmp_path / "cfg.json"
    path.write_text('{"a": 1}', encoding="utf-8")
    source = (
        JsonSource()
        .from_file(path)
        .from_str('{"b": 2.5}')
        .from_bytes(b"[1, 2]")
        .from_reader(io.StringIO('{"c": null}'))
    )
    assert source.errors() == []
    assert source.get() == [{"a": 1}, {"b": 2.5}, [1, 2], {"c": None}]


def test_json_reader_may_yield_bytes() -> None:
    assert JsonSource().from_reader(io.BytesIO(b'{"x": true}')).get() == [{"x": True}]


def test_json_parse_error_is_recorded_with_cause() -> None:
    source = JsonSource().from_str("{not json")
    [error] = source.errors()
    assert isinstance(error, SourceReadError)
    assert isinstance(error.__cause__, ValueError)
    assert source.get() == []


def test_json_invalid_utf8_is_recorded() -> None:
    assert len(JsonSource().from_bytes(b"\xff\xfe").errors()) == 1

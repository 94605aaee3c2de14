from __future__ import annotations

from pathlib import Path

import pytest

from configset.loaders.env_source import EnvSource


def test_env_file_values_stay_strings(tmp_path: Path) -> None:
    path = tmp_path / ".env"
    path.write_text("# comment\nHOST=localhost\nPORT=5432\nexport DEBUG=true\nQUOTED=\"a b\"\n", encoding="utf-8")
    [value] = EnvSource().from_file(path).get()
    assert value == {"HOST": "localhost", "PORT": "5432", "DEBUG": "true", "QUOTED": "a b"}


def test_env_key_without_value_maps_to_none() -> None:
    [value] = EnvSource().from_str("FLAG\nNAME=x\n").get()
    assert value == {"FLAG": None, "NAME": "x"}


def test_env_is_not_interpolated() -> None:
    [value] = EnvSource().from_str("A=1\nB=${A}\n").get()
    assert value["B"] == "${A}"


def test_env_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CONFIGSET_TEST_VALUE", "42")
    [value] = EnvSource().from_environment().get()
    assert value["CONFIGSET_TEST_VALUE"] == "42"


def test_env_missing_file_is_recorded(tmp_path: Path) -> None:
    source = EnvSource().from_file(tmp_path / "absent.env")
    assert len(source.errors()) == 1
    assert source.get() == []

from __future__ import annotations

import pytest
from pydantic import ValidationError

from configset.options import ConfigSetOptions, DecodeOptions, LoadOptions


def test_defaults() -> None:
    assert ConfigSetOptions().tag == "cfg"
    assert LoadOptions().prefix == ""
    assert DecodeOptions() == DecodeOptions(strict=False, prefix="")


def test_decode_prefix_may_be_a_full_path() -> None:
    assert DecodeOptions(prefix="services[0].db").prefix == "services[0].db"


@pytest.mark.parametrize("prefix", ["a.b", "list[0]", "[key]"])
def test_load_prefix_must_be_a_single_plain_key(prefix: str) -> None:
    with pytest.raises(ValidationError):
        LoadOptions(prefix=prefix)


def test_unknown_options_are_rejected() -> None:
    with pytest.raises(ValidationError):
        DecodeOptions(strict=True, verbose=True)  # type: ignore[call-arg]


def test_options_are_frozen() -> None:
    options = DecodeOptions(strict=True)
    with pytest.raises(ValidationError):
        options.strict = False  # type: ignore[misc]

from __future__ import annotations

from configset.decode.tags import FieldPolicy, parse_tag


def test_missing_annotation_is_empty_policy() -> None:
    assert parse_tag(None) == FieldPolicy()
    assert parse_tag("") == FieldPolicy()


def test_path_only() -> None:
    assert parse_tag("db.host") == FieldPolicy(path="db.host")


def test_flags_in_any_order() -> None:
    policy = parse_tag("port,required,strict")
    assert policy == FieldPolicy(path="port", required=True, strict=True)


def test_default_literal_is_kept_verbatim() -> None:
    policy = parse_tag("timeout,default=15s")
    assert policy.default == "15s"
    assert not policy.required


def test_unknown_flags_are_ignored() -> None:
    assert parse_tag("name,omitempty") == FieldPolicy(path="name")


def test_inherit_strict_only_turns_strict_on() -> None:
    lenient = FieldPolicy(path="a")
    assert lenient.inherit_strict(True).strict
    assert not lenient.inherit_strict(False).strict
    assert FieldPolicy(path="a", strict=True).inherit_strict(False).strict

from __future__ import annotations

from collections.abc import Iterable

from configset.errors import MergeConflictError, NilValueError, UnsupportedValueError
from configset.path.resolver import resolve

NO_PREFIX = ""

_ABSENT = object()


class ValueStore:
    # Owns the merged generic tree; every merge builds a new root and swaps it in.
    def __init__(self) -> None:
        self._root: object = None

    @property
    def root(self) -> object:
        return self._root

    def get(self, path: str = "") -> object:
        return resolve(self._root, path)

    def merge(self, value: object, *, prefix: str = NO_PREFIX) -> None:
        self.merge_all([value], prefix=prefix)

    def merge_all(self, values: Iterable[object], *, prefix: str = NO_PREFIX) -> None:
        # All-or-nothing: a conflict in any value leaves the stored tree untouched.
        root = self._root
        for value in values:
            root = merged_root(root, value, prefix)
        self._root = root


def merged_root(root: object, value: object, prefix: str = NO_PREFIX) -> object:
    _check_loadable(value)
    if not prefix:
        return _merge_slot(_ABSENT if root is None else root, value)

    if root is None:
        root = {}
    if not isinstance(root, dict):
        raise MergeConflictError(
            f"cannot load value under prefix '{prefix}' into {type(root).__name__} root"
        )
    new_root = dict(root)
    new_root[prefix] = _merge_slot(root.get(prefix, _ABSENT), value, prefix)
    return new_root


def _check_loadable(value: object) -> None:
    if value is None:
        raise NilValueError("value cannot be None")
    if not isinstance(value, (dict, list)):
        raise UnsupportedValueError(f"cannot apply value of this type: {type(value).__name__}")


def _merge_slot(existing: object, incoming: dict | list, prefix: str = NO_PREFIX) -> object:
    if existing is _ABSENT:
        return dict(incoming) if isinstance(incoming, dict) else list(incoming)

    if isinstance(incoming, dict):
        if not isinstance(existing, dict):
            raise MergeConflictError(_conflict_message("map", existing, prefix))
        return {**existing, **incoming}

    if not isinstance(existing, list):
        raise MergeConflictError(_conflict_message("list", existing, prefix))
    return [*existing, *incoming]


def _conflict_message(kind: str, existing: object, prefix: str) -> str:
    where = f" at prefix '{prefix}'" if prefix else ""
    return f"cannot apply {kind} value{where} onto existing {type(existing).__name__}"

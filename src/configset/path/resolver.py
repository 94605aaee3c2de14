from __future__ import annotations

from collections.abc import Iterable

from configset.errors import (
    IndexOutOfBoundsError,
    KeyNotFoundError,
    NotAListError,
    NotAMappingError,
)
from configset.path.segment import IndexSegment, KeySegment, PathSegment, iter_segments


def resolve(root: object, path: str) -> object:
    # Walk the generic tree one segment at a time; any miss aborts the whole walk.
    return resolve_segments(root, iter_segments(path))


def resolve_segments(root: object, segments: Iterable[PathSegment]) -> object:
    current = root
    for segment in segments:
        current = resolve_segment(current, segment)
    return current


def resolve_segment(value: object, segment: PathSegment) -> object:
    if isinstance(segment, KeySegment):
        return _get_map_value(value, segment.key)
    return _get_list_value(value, segment.index)


def _get_map_value(value: object, key: str) -> object:
    if not isinstance(value, dict):
        raise NotAMappingError(
            f"cannot get key from non-mapping value: {key}({type(value).__name__})",
            segment=key,
        )
    if key not in value:
        raise KeyNotFoundError(f"key not found: {key}", segment=key)
    return value[key]


def _get_list_value(value: object, index: int) -> object:
    rendered = str(IndexSegment(index))
    if not isinstance(value, list):
        raise NotAListError(
            f"cannot get index from non-list value: {index}({type(value).__name__})",
            segment=rendered,
        )
    if index < 0 or index >= len(value):
        raise IndexOutOfBoundsError(f"index out of bounds: {index}", segment=rendered)
    return value[index]

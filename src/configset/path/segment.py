from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

SEGMENT_DIVIDER = "."
OPEN_BRACKET = "["
CLOSE_BRACKET = "]"

_INDEX_PATTERN = re.compile(r"[0-9]+")


@dataclass(frozen=True, slots=True)
class KeySegment:
    # Mapping lookup by exact, case-sensitive key.
    key: str

    def __str__(self) -> str:
        return self.key


@dataclass(frozen=True, slots=True)
class IndexSegment:
    # List lookup by non-negative position.
    index: int

    def __str__(self) -> str:
        return f"{OPEN_BRACKET}{self.index}{CLOSE_BRACKET}"


PathSegment = KeySegment | IndexSegment


def next_segment(path: str) -> tuple[PathSegment, str]:
    # Split off the leading segment; the remainder never starts with a divider.
    if path.startswith(OPEN_BRACKET):
        close = path.find(CLOSE_BRACKET)
        if close != -1:
            content = path[1:close]
            remaining = path[close + 1 :]
            if remaining.startswith(SEGMENT_DIVIDER):
                remaining = remaining[1:]
            return _classify(content), remaining

    divider = path.find(SEGMENT_DIVIDER)
    bracket = path.find(OPEN_BRACKET, 1)
    if bracket != -1 and (divider == -1 or bracket < divider) and CLOSE_BRACKET in path[bracket:]:
        return KeySegment(path[:bracket]), path[bracket:]

    if divider == -1:
        return KeySegment(path), ""
    return KeySegment(path[:divider]), path[divider + 1 :]


def iter_segments(path: str) -> Iterator[PathSegment]:
    while path:
        segment, path = next_segment(path)
        yield segment


def parse_path(path: str) -> tuple[PathSegment, ...]:
    return tuple(iter_segments(path))


def _classify(content: str) -> PathSegment:
    # Digits-only bracket content addresses a list; anything else is an escaped key.
    if _INDEX_PATTERN.fullmatch(content):
        return IndexSegment(int(content))
    return KeySegment(content)

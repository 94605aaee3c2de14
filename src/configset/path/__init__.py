from .resolver import resolve, resolve_segment, resolve_segments
from .segment import IndexSegment, KeySegment, PathSegment, iter_segments, next_segment, parse_path

__all__ = [
    "IndexSegment",
    "KeySegment",
    "PathSegment",
    "iter_segments",
    "next_segment",
    "parse_path",
    "resolve",
    "resolve_segment",
    "resolve_segments",
]

from .common import RawMessage, parse_duration, parse_rfc3339
from .engine import DecodeEngine
from .primitives import (
    Float32,
    Float64,
    FloatBits,
    Int8,
    Int16,
    Int32,
    Int64,
    IntBits,
    Uint8,
    Uint16,
    Uint32,
    Uint64,
)
from .protocols import Decodable, TextUnmarshaler
from .tags import DEFAULT_TAG, FieldPolicy, parse_tag

__all__ = [
    "DEFAULT_TAG",
    "Decodable",
    "DecodeEngine",
    "FieldPolicy",
    "Float32",
    "Float64",
    "FloatBits",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "IntBits",
    "RawMessage",
    "TextUnmarshaler",
    "Uint8",
    "Uint16",
    "Uint32",
    "Uint64",
    "parse_duration",
    "parse_rfc3339",
    "parse_tag",
]

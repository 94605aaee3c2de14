from __future__ import annotations

import math
import re
import struct
from dataclasses import dataclass
from typing import Annotated

from configset.decode.formatting import stringify
from configset.errors import PrimitiveParseError

_TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})
_LEGACY_OCTAL = re.compile(r"[+-]?0[0-9]+")

FLOAT32_MAX = 3.4028234663852886e38


@dataclass(frozen=True, slots=True)
class IntBits:
    # Width marker for sized integer targets, attached through Annotated.
    bits: int
    signed: bool = True

    @property
    def bounds(self) -> tuple[int, int]:
        if self.signed:
            return -(1 << (self.bits - 1)), (1 << (self.bits - 1)) - 1
        return 0, (1 << self.bits) - 1


@dataclass(frozen=True, slots=True)
class FloatBits:
    bits: int


Int8 = Annotated[int, IntBits(8)]
Int16 = Annotated[int, IntBits(16)]
Int32 = Annotated[int, IntBits(32)]
Int64 = Annotated[int, IntBits(64)]
Uint8 = Annotated[int, IntBits(8, signed=False)]
Uint16 = Annotated[int, IntBits(16, signed=False)]
Uint32 = Annotated[int, IntBits(32, signed=False)]
Uint64 = Annotated[int, IntBits(64, signed=False)]
Float32 = Annotated[float, FloatBits(32)]
Float64 = Annotated[float, FloatBits(64)]


def decode_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    _reject_null(value, "bool")
    text = stringify(value)
    if text in _TRUE_LITERALS:
        return True
    if text in _FALSE_LITERALS:
        return False
    raise PrimitiveParseError(f"cannot parse bool: {text!r}")


def decode_str(value: object) -> str:
    _reject_null(value, "str")
    return stringify(value)


def decode_float(value: object, width: FloatBits | None = None) -> float:
    if isinstance(value, float):
        number = value
    else:
        _reject_null(value, "float")
        text = stringify(value)
        try:
            number = float(text)
        except ValueError as exc:
            raise PrimitiveParseError(f"cannot parse float: {text!r}") from exc

    if width is not None and width.bits == 32:
        return _narrow_float32(number)
    return number


def decode_int(value: object, width: IntBits | None = None) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        number = value
    else:
        _reject_null(value, "int")
        text = stringify(value)
        if width is not None and not width.signed and text.lstrip().startswith(("-", "+")):
            raise PrimitiveParseError(f"cannot parse uint: {text!r}")
        try:
            # Base 0 honours 0x / 0o / 0b prefixes and underscore separators; a bare leading 0 means octal.
            number = int(text, 8) if _LEGACY_OCTAL.fullmatch(text) else int(text, 0)
        except ValueError as exc:
            raise PrimitiveParseError(f"cannot parse int: {text!r}") from exc

    if width is not None:
        low, high = width.bounds
        if number < low or number > high:
            kind = "int" if width.signed else "uint"
            raise PrimitiveParseError(f"value {number} out of range for {kind}{width.bits}")
    return number


def decode_primitive(target: type, width: IntBits | FloatBits | None, value: object) -> object:
    if target is bool:
        return decode_bool(value)
    if target is str:
        return decode_str(value)
    if target is float:
        return decode_float(value, width if isinstance(width, FloatBits) else None)
    return decode_int(value, width if isinstance(width, IntBits) else None)


def _narrow_float32(number: float) -> float:
    if math.isnan(number) or math.isinf(number):
        return number
    # struct.pack rounds oversized values to inf instead of failing.
    if abs(number) > FLOAT32_MAX:
        raise PrimitiveParseError(f"value {number} out of range for float32")
    return struct.unpack("f", struct.pack("f", number))[0]


def _reject_null(value: object, kind: str) -> None:
    if value is None:
        raise PrimitiveParseError(f"cannot decode null into {kind}")

from __future__ import annotations

import types
from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from dataclasses import dataclass, field, fields, is_dataclass
from functools import lru_cache
from ipaddress import IPv4Address, IPv6Address
from typing import Annotated, Union, get_args, get_origin, get_type_hints

from configset.decode.common import CommonDecoder, decode_ip_address, get_common_decoder
from configset.decode.primitives import FloatBits, IntBits
from configset.decode.protocols import Decodable, TextUnmarshaler, is_user_class
from configset.errors import InvalidTargetError

_PRIMITIVE_TYPES = (bool, str, int, float)
_SEQUENCE_ORIGINS = (list, Sequence, MutableSequence)
_MAPPING_ORIGINS = (dict, Mapping, MutableMapping)
_NONE_TYPE = type(None)
_IP_ADDRESS_TYPES = frozenset({IPv4Address, IPv6Address})
IP_ADDRESS = IPv4Address | IPv6Address


@dataclass(frozen=True, slots=True)
class CommonShape:
    # target is a type, or IP_ADDRESS.
    target: object
    decoder: CommonDecoder


@dataclass(frozen=True, slots=True)
class PointerShape:
    # Optional[T]: a null source yields None, anything else decodes a T.
    inner: Shape


@dataclass(frozen=True, slots=True)
class DecodableShape:
    target: type


@dataclass(frozen=True, slots=True)
class TextShape:
    target: type


@dataclass(frozen=True, slots=True)
class StructShape:
    # Fields are looked up lazily so self-referential dataclasses can be described.
    target: type

    @property
    def fields(self) -> tuple[StructField, ...]:
        return struct_fields(self.target)


@dataclass(frozen=True, slots=True)
class SliceShape:
    element: Shape


@dataclass(frozen=True, slots=True)
class MapShape:
    key: Shape
    value: Shape


@dataclass(frozen=True, slots=True)
class PrimitiveShape:
    target: type
    width: IntBits | FloatBits | None = None


@dataclass(frozen=True, slots=True)
class UnsupportedShape:
    target: object


Shape = (
    CommonShape
    | PointerShape
    | DecodableShape
    | TextShape
    | StructShape
    | SliceShape
    | MapShape
    | PrimitiveShape
    | UnsupportedShape
)


@dataclass(frozen=True, slots=True)
class StructField:
    name: str
    shape: Shape
    metadata: Mapping[str, object] = field(default_factory=dict, compare=False, hash=False)

    def annotation(self, tag: str) -> str | None:
        value = self.metadata.get(tag)
        return value if isinstance(value, str) else None


def shape_of(hint: object) -> Shape:
    try:
        hash(hint)
    except TypeError:
        return _build_shape(hint)
    return _cached_shape_of(hint)


def common_decoder_of(shape: Shape) -> CommonDecoder | None:
    # Pointer indirection is normalized away before the common-decoder lookup.
    if isinstance(shape, PointerShape):
        shape = shape.inner
    if isinstance(shape, CommonShape):
        return shape.decoder
    return None


@lru_cache(maxsize=None)
def struct_fields(cls: type) -> tuple[StructField, ...]:
    try:
        hints = get_type_hints(cls, include_extras=True)
    except (NameError, TypeError) as exc:
        raise InvalidTargetError(f"cannot resolve type hints of {cls.__name__}: {exc}") from exc

    collected: list[StructField] = []
    for item in fields(cls):
        # Private and init=False fields are never attempted nor counted.
        if item.name.startswith("_") or not item.init:
            continue
        collected.append(StructField(name=item.name, shape=shape_of(hints[item.name]), metadata=item.metadata))
    return tuple(collected)


@lru_cache(maxsize=None)
def _cached_shape_of(hint: object) -> Shape:
    return _build_shape(hint)


def _build_shape(hint: object) -> Shape:
    origin = get_origin(hint)

    if origin is Annotated:
        base, *extras = get_args(hint)
        return _with_width(shape_of(base), extras)

    if origin is Union or origin is types.UnionType:
        members = get_args(hint)
        present = [member for member in members if member is not _NONE_TYPE]
        if frozenset(present) == _IP_ADDRESS_TYPES:
            address = CommonShape(IP_ADDRESS, decode_ip_address)
            return PointerShape(address) if _NONE_TYPE in members else address
        if len(present) == 1 and len(members) == 2:
            return PointerShape(shape_of(present[0]))
        return UnsupportedShape(hint)

    supertype = getattr(hint, "__supertype__", None)
    if supertype is not None:
        return shape_of(supertype)

    if origin in _SEQUENCE_ORIGINS:
        args = get_args(hint)
        return SliceShape(shape_of(args[0])) if args else UnsupportedShape(hint)

    if origin in _MAPPING_ORIGINS:
        args = get_args(hint)
        return MapShape(shape_of(args[0]), shape_of(args[1])) if len(args) == 2 else UnsupportedShape(hint)

    if not isinstance(hint, type):
        return UnsupportedShape(hint)

    decoder = get_common_decoder(hint)
    if decoder is not None:
        return CommonShape(hint, decoder)
    if is_user_class(hint) and issubclass(hint, Decodable):
        return DecodableShape(hint)
    if is_dataclass(hint):
        return StructShape(hint)
    if is_user_class(hint) and issubclass(hint, TextUnmarshaler):
        return TextShape(hint)
    if hint in _PRIMITIVE_TYPES:
        return PrimitiveShape(hint)
    return UnsupportedShape(hint)


def _with_width(shape: Shape, extras: list[object]) -> Shape:
    if not isinstance(shape, PrimitiveShape):
        return shape
    for extra in extras:
        if isinstance(extra, IntBits) and shape.target is int:
            return PrimitiveShape(int, extra)
        if isinstance(extra, FloatBits) and shape.target is float:
            return PrimitiveShape(float, extra)
    return shape

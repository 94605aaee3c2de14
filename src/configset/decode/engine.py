from __future__ import annotations

import copy
from collections.abc import Callable

from configset.decode.formatting import stringify
from configset.decode.primitives import decode_primitive
from configset.decode.shapes import (
    DecodableShape,
    MapShape,
    PointerShape,
    PrimitiveShape,
    Shape,
    SliceShape,
    StructShape,
    TextShape,
    common_decoder_of,
    shape_of,
)
from configset.decode.tags import DEFAULT_TAG, FieldPolicy, parse_tag
from configset.errors import (
    CustomDecodeError,
    DecodeError,
    InvalidTargetError,
    NoFieldsSetError,
    NotAMappingSourceError,
    NotASliceSourceError,
    PathError,
    PrimitiveParseError,
    RequiredFieldError,
    TagDeclarationError,
    TextUnmarshalError,
    UnsupportedKindError,
)
from configset.observability.logging import LogSink, emit_log
from configset.path.resolver import resolve

SLICE_SEPARATOR = ";"

# Marks "leave the target slot as it is" (absent source or absorbed failure).
UNSET = object()

DecodeResult = tuple[int, object]


class DecodeEngine:
    # Walks a target shape and a generic source tree in lockstep, counting populated leaves.
    def __init__(self, *, tag: str = DEFAULT_TAG, log_sink: LogSink | None = None) -> None:
        self._tag = tag
        self._log_sink = log_sink

    def decode(self, target: object, root: object, *, strict: bool = False, prefix: str = "") -> int:
        if target is None or isinstance(target, type):
            raise InvalidTargetError("target must be an instance of a dataclass or Decodable type")
        shape = shape_of(type(target))
        if not isinstance(shape, (StructShape, DecodableShape)):
            raise InvalidTargetError(
                f"target must be an instance of a dataclass or Decodable type, got {type(target).__name__}"
            )

        found, source = self._field_source(FieldPolicy(path=prefix, strict=strict), root, "")
        count = 0
        if found:
            count, _ = self._decode_value(shape, source, strict, target, "", in_place=True)
        if count == 0:
            raise NoFieldsSetError("none of the target fields were set from config values")

        emit_log(self._log_sink, "debug", "config decoded", target=type(target).__name__, fields=count, prefix=prefix)
        return count

    def decode_field(
        self,
        shape: Shape,
        policy: FieldPolicy,
        subtree: object,
        current: object,
        trail: str,
    ) -> DecodeResult:
        found, source = self._field_source(policy, subtree, trail)
        if not found:
            return 0, UNSET
        return self._decode_value(shape, source, policy.strict, current, trail)

    def _field_source(self, policy: FieldPolicy, subtree: object, trail: str) -> tuple[bool, object]:
        if policy.required and policy.default is not None:
            raise TagDeclarationError(f"cannot have default value for required field: {policy.path!r}").at(trail)
        try:
            return True, resolve(subtree, policy.path)
        except PathError as exc:
            if policy.required:
                raise RequiredFieldError(f"field is required: {exc}").at(trail) from exc
            if policy.default is not None:
                return True, policy.default
            # Absence is never an error on its own, strict or not.
            return False, None

    def _decode_value(
        self,
        shape: Shape,
        source: object,
        strict: bool,
        current: object,
        trail: str,
        *,
        in_place: bool = False,
    ) -> DecodeResult:
        decoder = common_decoder_of(shape)
        if decoder is not None:
            if isinstance(shape, PointerShape) and source is None:
                return 0, _nil_pointer(current)
            return self._convert(decoder, source, strict, trail)

        if isinstance(shape, PointerShape):
            if source is None:
                return 0, _nil_pointer(current)
            return self._decode_value(shape.inner, source, strict, current, trail)

        if isinstance(shape, DecodableShape):
            instance = current if in_place else self._new_instance(shape.target, trail)
            try:
                instance.decode(source)
            except Exception as exc:
                raise CustomDecodeError(f"cannot decode field with custom decoder: {exc}").at(trail) from exc
            return 1, instance

        if isinstance(shape, TextShape):
            return self._convert(lambda value: _unmarshal(shape, value), source, strict, trail)
        if isinstance(shape, MapShape):
            return self._decode_map(shape, source, strict, trail)
        if isinstance(shape, SliceShape):
            return self._decode_slice(shape, source, strict, trail)
        if isinstance(shape, StructShape):
            return self._decode_struct(shape, source, strict, current, trail, in_place)
        if isinstance(shape, PrimitiveShape):
            return self._convert(
                lambda value: decode_primitive(shape.target, shape.width, value), source, strict, trail
            )
        raise UnsupportedKindError(f"unsupported target type: {_type_name(shape.target)}").at(trail)

    def _decode_map(self, shape: MapShape, source: object, strict: bool, trail: str) -> DecodeResult:
        if not isinstance(source, dict):
            error = NotAMappingSourceError(f"cannot decode {type(source).__name__} value into map")
            return self._absorb(error, strict, trail)

        result: dict[object, object] = {}
        count = 0
        for raw_key, raw_value in source.items():
            entry_trail = f"{trail}[{raw_key}]"
            try:
                key = self._decode_key(shape.key, raw_key, entry_trail)
            except (PrimitiveParseError, TextUnmarshalError) as exc:
                self._absorb(exc, strict, entry_trail)
                continue
            entry_count, value = self._decode_value(shape.value, raw_value, strict, None, entry_trail)
            if value is UNSET:
                continue
            result[key] = value
            count += entry_count
        return count, result

    def _decode_slice(self, shape: SliceShape, source: object, strict: bool, trail: str) -> DecodeResult:
        if isinstance(source, str):
            source = source.split(SLICE_SEPARATOR)
        if not isinstance(source, list):
            raise NotASliceSourceError(
                f"cannot decode non-slice value to target: {type(source).__name__}"
            ).at(trail)

        result: list[object] = []
        count = 0
        for index, item in enumerate(source):
            item_count, value = self._decode_value(shape.element, item, strict, None, f"{trail}[{index}]")
            if value is UNSET:
                continue
            result.append(value)
            count += item_count
        return count, result

    def _decode_struct(
        self,
        shape: StructShape,
        source: object,
        strict: bool,
        current: object,
        trail: str,
        in_place: bool,
    ) -> DecodeResult:
        if not in_place and not isinstance(current, shape.target):
            # Fresh instances go through the constructor, so fields without defaults work.
            count, values = self._decode_fields(shape, source, strict, None, trail)
            return count, self._construct(shape.target, values, trail)

        # Defaults may be shared between instances; never mutate them.
        instance = current if in_place else copy.copy(current)
        count, values = self._decode_fields(shape, source, strict, instance, trail)
        for name, value in values.items():
            # Bypass frozen/slots via object.__setattr__.
            object.__setattr__(instance, name, value)
        return count, instance

    def _decode_fields(
        self,
        shape: StructShape,
        source: object,
        strict: bool,
        instance: object,
        trail: str,
    ) -> tuple[int, dict[str, object]]:
        count = 0
        values: dict[str, object] = {}
        for item in shape.fields:
            policy = parse_tag(item.annotation(self._tag)).inherit_strict(strict)
            field_trail = f"{trail}.{item.name}" if trail else item.name
            field_count, value = self.decode_field(
                item.shape, policy, source, getattr(instance, item.name, None), field_trail
            )
            if value is not UNSET:
                values[item.name] = value
            count += field_count
        return count, values

    def _decode_key(self, shape: Shape, raw_key: object, trail: str) -> object:
        if isinstance(shape, PrimitiveShape):
            return decode_primitive(shape.target, shape.width, raw_key)
        if isinstance(shape, TextShape):
            return _unmarshal(shape, raw_key)
        raise UnsupportedKindError(f"unsupported map key type: {_type_name(getattr(shape, 'target', shape))}").at(trail)

    def _convert(self, convert: Callable[[object], object], source: object, strict: bool, trail: str) -> DecodeResult:
        try:
            return 1, convert(source)
        except DecodeError as exc:
            return self._absorb(exc, strict, trail)

    def _absorb(self, error: DecodeError, strict: bool, trail: str) -> DecodeResult:
        # Conversion failures are fatal only for strict fields.
        if strict:
            raise error.at(trail)
        emit_log(
            self._log_sink,
            "warning",
            "config field skipped",
            field=trail,
            error=str(error),
            error_type=type(error).__name__,
        )
        return 0, UNSET

    def _construct(self, cls: type, values: dict[str, object], trail: str) -> object:
        try:
            return cls(**values)
        except TypeError as exc:
            raise InvalidTargetError(f"{trail or cls.__name__}: cannot build {cls.__name__}: {exc}") from exc

    def _new_instance(self, cls: type, trail: str) -> object:
        try:
            return cls()
        except TypeError as exc:
            raise InvalidTargetError(
                f"{trail or cls.__name__}: {cls.__name__} must be constructible without arguments"
            ) from exc


def _unmarshal(shape: TextShape, value: object) -> object:
    try:
        return shape.target.unmarshal_text(stringify(value).encode("utf-8"))
    except DecodeError:
        raise
    except (ValueError, TypeError) as exc:
        raise TextUnmarshalError(f"cannot unmarshal {shape.target.__name__} from text: {exc}") from exc


def _nil_pointer(current: object) -> object:
    # A null source leaves an already-set optional alone and otherwise yields None.
    return UNSET if current is not None else None


def _type_name(target: object) -> str:
    return getattr(target, "__name__", None) or repr(target)

from __future__ import annotations

import json
import re
from collections.abc import Callable
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal, InvalidOperation
from ipaddress import IPv4Address, IPv6Address, ip_address
from urllib.parse import ParseResult, urlparse

from pydantic import AnyUrl, HttpUrl, TypeAdapter, ValidationError

from configset.decode.formatting import stringify
from configset.errors import (
    DurationParseError,
    IPParseError,
    NilSourceError,
    RawMessageError,
    TimestampParseError,
    URLParseError,
)

CommonDecoder = Callable[[object], object]


class RawMessage(bytes):
    # Verbatim JSON encoding of whatever generic value sits at the field's path.
    def loads(self) -> object:
        return json.loads(self)


_NANOSECONDS_PER_UNIT = {
    "ns": Decimal(1),
    "us": Decimal(1_000),
    "µs": Decimal(1_000),  # U+00B5
    "μs": Decimal(1_000),  # U+03BC
    "ms": Decimal(1_000_000),
    "s": Decimal(1_000_000_000),
    "m": Decimal(60_000_000_000),
    "h": Decimal(3_600_000_000_000),
}
_DURATION_PART = re.compile(r"([0-9]*(?:\.[0-9]*)?)(ns|us|µs|μs|ms|s|m|h)")

_RFC3339 = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})"
)

_ANY_URL = TypeAdapter(AnyUrl)
_HTTP_URL = TypeAdapter(HttpUrl)


def decode_duration(value: object) -> timedelta:
    _reject_null(value, "duration")
    if isinstance(value, timedelta):
        return value
    return parse_duration(stringify(value))


def parse_duration(text: str) -> timedelta:
    # Accepts sequences like "1h30m", "1.5s", "-300ms"; a bare "0" is the only unitless form.
    body = text
    negative = False
    if body[:1] in ("-", "+"):
        negative = body[0] == "-"
        body = body[1:]
    if body == "0":
        return timedelta(0)
    if not body:
        raise DurationParseError(f"cannot parse duration: {text!r}")

    total = Decimal(0)
    position = 0
    while position < len(body):
        match = _DURATION_PART.match(body, position)
        if match is None or match.group(1) in ("", "."):
            raise DurationParseError(f"cannot parse duration: {text!r}")
        try:
            total += Decimal(match.group(1)) * _NANOSECONDS_PER_UNIT[match.group(2)]
        except InvalidOperation as exc:
            raise DurationParseError(f"cannot parse duration: {text!r}") from exc
        position = match.end()

    microseconds = int(total / 1_000)
    try:
        return timedelta(microseconds=-microseconds if negative else microseconds)
    except OverflowError as exc:
        raise DurationParseError(f"duration out of range: {text!r}") from exc


def decode_ipv4(value: object) -> IPv4Address:
    _reject_null(value, "IPv4 address")
    try:
        return IPv4Address(stringify(value))
    except ValueError as exc:
        raise IPParseError(f"cannot parse IP address: {value!r}") from exc


def decode_ipv6(value: object) -> IPv6Address:
    _reject_null(value, "IPv6 address")
    try:
        return IPv6Address(stringify(value))
    except ValueError as exc:
        raise IPParseError(f"cannot parse IP address: {value!r}") from exc


def decode_ip_address(value: object) -> IPv4Address | IPv6Address:
    # Dotted and colon literals alike, for IPv4Address | IPv6Address targets.
    _reject_null(value, "IP address")
    try:
        return ip_address(stringify(value))
    except ValueError as exc:
        raise IPParseError(f"cannot parse IP address: {value!r}") from exc


def decode_raw_message(value: object) -> RawMessage:
    _reject_null(value, "raw message")
    try:
        encoded = json.dumps(
            value, sort_keys=True, separators=(",", ":"), ensure_ascii=False, default=_json_temporal
        )
    except (TypeError, ValueError) as exc:
        raise RawMessageError(f"cannot marshal source value to JSON: {exc}") from exc
    return RawMessage(encoded.encode("utf-8"))


def decode_timestamp(value: object) -> datetime:
    _reject_null(value, "timestamp")
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise TimestampParseError(f"cannot parse time from non-string type: {type(value).__name__}")
    return parse_rfc3339(value)


def parse_rfc3339(text: str) -> datetime:
    match = _RFC3339.fullmatch(text)
    if match is None:
        raise TimestampParseError(f"cannot parse time: {text!r} is not RFC 3339")
    year, month, day, hour, minute, second, fraction, offset = match.groups()
    microsecond = int((fraction or "").ljust(6, "0")[:6])
    try:
        return datetime(
            int(year),
            int(month),
            int(day),
            int(hour),
            int(minute),
            int(second),
            microsecond,
            tzinfo=_parse_offset(offset),
        )
    except ValueError as exc:
        raise TimestampParseError(f"cannot parse time: {text!r}: {exc}") from exc


def decode_any_url(value: object) -> AnyUrl:
    return _validate_url(_ANY_URL, value)


def decode_http_url(value: object) -> HttpUrl:
    return _validate_url(_HTTP_URL, value)


def decode_parse_result(value: object) -> ParseResult:
    _reject_null(value, "URL")
    try:
        return urlparse(stringify(value))
    except ValueError as exc:
        raise URLParseError(f"cannot parse URL: {value!r}") from exc


COMMON_DECODERS: dict[type, CommonDecoder] = {
    timedelta: decode_duration,
    IPv4Address: decode_ipv4,
    IPv6Address: decode_ipv6,
    RawMessage: decode_raw_message,
    datetime: decode_timestamp,
    AnyUrl: decode_any_url,
    HttpUrl: decode_http_url,
    ParseResult: decode_parse_result,
}


def get_common_decoder(target_type: object) -> CommonDecoder | None:
    # Exact type identity only; subclasses do not inherit a common decoder.
    if not isinstance(target_type, type):
        return None
    return COMMON_DECODERS.get(target_type)


def _validate_url(adapter: TypeAdapter, value: object) -> AnyUrl:
    _reject_null(value, "URL")
    try:
        return adapter.validate_python(stringify(value))
    except ValidationError as exc:
        raise URLParseError(f"cannot parse URL: {value!r}") from exc


def _json_temporal(value: object) -> str:
    # TOML and YAML sources carry dates and times; JSON gets their RFC 3339 text.
    if isinstance(value, (datetime, date, time)):
        return value.isoformat().replace("+00:00", "Z")
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _parse_offset(offset: str) -> timezone:
    if offset == "Z":
        return timezone.utc
    sign = -1 if offset[0] == "-" else 1
    hours, minutes = int(offset[1:3]), int(offset[4:6])
    if hours > 23 or minutes > 59:
        raise TimestampParseError(f"cannot parse time zone offset: {offset!r}")
    return timezone(sign * timedelta(hours=hours, minutes=minutes))


def _reject_null(value: object, kind: str) -> None:
    if value is None:
        raise NilSourceError(f"cannot decode null into {kind}")

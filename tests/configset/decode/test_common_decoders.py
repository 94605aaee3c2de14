from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from ipaddress import IPv4Address, IPv6Address
from urllib.parse import ParseResult

import pytest
from pydantic import HttpUrl

from configset.decode.common import (
    RawMessage,
    decode_any_url,
    decode_duration,
    decode_http_url,
    decode_ip_address,
    decode_ipv4,
    decode_ipv6,
    decode_parse_result,
    decode_raw_message,
    decode_timestamp,
    get_common_decoder,
    parse_duration,
)
from configset.errors import (
    DurationParseError,
    IPParseError,
    NilSourceError,
    RawMessageError,
    TimestampParseError,
    URLParseError,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("15s", timedelta(seconds=15)),
        ("1h30m", timedelta(hours=1, minutes=30)),
        ("1.5s", timedelta(seconds=1.5)),
        ("-300ms", timedelta(milliseconds=-300)),
        ("250us", timedelta(microseconds=250)),
        ("0", timedelta(0)),
    ],
)
def test_parse_duration_accepts_unit_sequences(text: str, expected: timedelta) -> None:
    assert parse_duration(text) == expected


@pytest.mark.parametrize("text", ["fifteen seconds", "", "10", "5 s", "3d"])
def test_parse_duration_rejects_malformed_text(text: str) -> None:
    with pytest.raises(DurationParseError):
        parse_duration(text)


def test_duration_passes_timedelta_through() -> None:
    assert decode_duration(timedelta(minutes=2)) == timedelta(minutes=2)


def test_ip_addresses() -> None:
    assert decode_ipv4("127.0.0.1") == IPv4Address("127.0.0.1")
    assert decode_ipv6("::1") == IPv6Address("::1")
    with pytest.raises(IPParseError):
        decode_ipv4("300.1.1.1")
    with pytest.raises(IPParseError):
        decode_ipv4("::1")


def test_ip_address_accepts_either_family() -> None:
    assert decode_ip_address("10.0.0.1") == IPv4Address("10.0.0.1")
    assert decode_ip_address("::1") == IPv6Address("::1")
    with pytest.raises(IPParseError):
        decode_ip_address("10.0.0")


def test_urls() -> None:
    url = decode_http_url("https://example.com/status")
    assert isinstance(url, HttpUrl)
    assert url.host == "example.com"
    assert decode_any_url("redis://cache:6379/0").scheme == "redis"
    with pytest.raises(URLParseError):
        decode_any_url("not a url")


def test_parse_result_keeps_url_components() -> None:
    parsed = decode_parse_result("postgres://app@db:5432/main")
    assert isinstance(parsed, ParseResult)
    assert parsed.hostname == "db"
    assert parsed.port == 5432


def test_rfc3339_timestamps() -> None:
    assert decode_timestamp("2024-01-02T03:04:05Z") == datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    parsed = decode_timestamp("2024-01-02T03:04:05.123+02:00")
    assert parsed.microsecond == 123000
    assert parsed.utcoffset() == timedelta(hours=2)


@pytest.mark.parametrize("raw", ["2024-01-02 03:04:05", "2024-01-02T03:04:05", "2024-13-02T03:04:05Z", 1700000000])
def test_timestamp_rejects_non_rfc3339(raw: object) -> None:
    with pytest.raises(TimestampParseError):
        decode_timestamp(raw)


def test_timestamp_passes_datetime_through() -> None:
    # TOML sources already produce datetime values.
    moment = datetime(2024, 5, 1, tzinfo=timezone.utc)
    assert decode_timestamp(moment) is moment


def test_raw_message_is_compact_sorted_json() -> None:
    raw = decode_raw_message({"b": 1, "a": [1, "x"]})
    assert isinstance(raw, RawMessage)
    assert raw == b'{"a":[1,"x"],"b":1}'
    assert raw.loads() == {"a": [1, "x"], "b": 1}


def test_raw_message_renders_dates_as_rfc3339_text() -> None:
    raw = decode_raw_message({"when": datetime(1979, 5, 27, 7, 32, tzinfo=timezone.utc), "day": date(1979, 5, 27)})
    assert raw == b'{"day":"1979-05-27","when":"1979-05-27T07:32:00Z"}'


def test_raw_message_rejects_unencodable_values() -> None:
    with pytest.raises(RawMessageError):
        decode_raw_message({"a": {1, 2}})


@pytest.mark.parametrize(
    "decoder",
    [decode_duration, decode_ipv4, decode_ipv6, decode_ip_address, decode_raw_message, decode_timestamp, decode_any_url, decode_parse_result],
)
def test_common_decoders_refuse_null(decoder: object) -> None:
    with pytest.raises(NilSourceError):
        decoder(None)  # type: ignore[operator]


def test_common_decoder_lookup_is_exact() -> None:
    class Window(timedelta):
        pass

    assert get_common_decoder(timedelta) is decode_duration
    assert get_common_decoder(Window) is None
    assert get_common_decoder(bool) is None

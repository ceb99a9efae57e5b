from __future__ import annotations

import logging
import struct
from datetime import date, datetime, time, timedelta, timezone
from pathlib import Path
from typing import Callable

import pytest

from pgtemporal.codec import TemporalCodec
from pgtemporal.config.models import CodecConfig
from pgtemporal.core.enums import NaiveTimestamptzPolicy, SqlType, TimeOverflowPolicy
from pgtemporal.core.errors import DecodingOverflow


@pytest.mark.parametrize(
    ("sql_type", "value"),
    [
        (SqlType.DATE, date(2018, 1, 1)),
        (SqlType.TIME, time(12, 0)),
        (SqlType.TIMESTAMP, datetime(2016, 1, 2, 1, 0)),
        (SqlType.TIMESTAMPTZ, datetime(2016, 1, 2, 1, 0, tzinfo=timezone.utc)),
    ],
)
def test_codec_should_round_trip_through_column_bytes(codec: TemporalCodec, sql_type: SqlType, value: object) -> None:
    assert codec.from_sql(sql_type, codec.to_sql(sql_type, value)) == value


def test_codec_should_accept_type_names(codec: TemporalCodec) -> None:
    raw = codec.to_sql("DATE", date(2000, 1, 1))
    assert raw == b"\x00\x00\x00\x00"
    assert codec.from_sql(" date ", bytearray(raw)) == date(2000, 1, 1)


def test_codec_should_reject_unknown_type_names(codec: TemporalCodec) -> None:
    with pytest.raises(ValueError):
        codec.to_sql("interval", timedelta(days=1))


def test_codec_should_reject_end_of_day_time_by_default(codec: TemporalCodec) -> None:
    with pytest.raises(DecodingOverflow):
        codec.decode_time(86_400_000_000)


def test_codec_should_wrap_end_of_day_time_when_configured(wrapping_codec: TemporalCodec) -> None:
    assert wrapping_codec.decode_time(86_400_000_000) == time(0, 0)
    raw = struct.pack("!q", 86_400_000_000)
    assert wrapping_codec.from_sql(SqlType.TIME, raw) == time(0, 0)


def test_codec_should_apply_naive_timestamptz_policy() -> None:
    strict = TemporalCodec(CodecConfig(naive_timestamptz=NaiveTimestamptzPolicy.REJECT))
    with pytest.raises(ValueError):
        strict.encode_timestamptz(datetime(2000, 1, 1))
    assert strict.encode_timestamptz(datetime(2000, 1, 1, tzinfo=timezone.utc)) == 0


def test_codec_should_decode_timestamptz_into_display_zone() -> None:
    codec = TemporalCodec(CodecConfig(display_timezone="Europe/Berlin"))
    decoded = codec.decode_timestamptz(0)
    assert decoded == datetime(2000, 1, 1, tzinfo=timezone.utc)
    assert decoded.utcoffset() == timedelta(hours=1)


def test_codec_should_expose_value_level_pairs(codec: TemporalCodec) -> None:
    assert codec.encode_date(date(1970, 1, 1)) == -10_957
    assert codec.decode_date(-10_957) == date(1970, 1, 1)
    assert codec.encode_time(time(0, 0, 1)) == 1_000_000
    assert codec.encode_timestamp(datetime(1970, 1, 1)) == -946_684_800_000_000
    assert codec.decode_timestamp(0) == datetime(2000, 1, 1)
    assert codec.decode_timestamptz(0).tzinfo is timezone.utc


def test_codec_from_yaml_should_apply_config_and_log_level(
    write_yaml: Callable[[str, str], Path],
    restore_package_logger: logging.Logger,
) -> None:
    path = write_yaml(
        "codec.yml",
        """
        codec:
          time_overflow: wrap
          log_level: debug
        """,
    )
    codec = TemporalCodec.from_yaml(path)
    assert codec.config.time_overflow is TimeOverflowPolicy.WRAP
    assert restore_package_logger.level == logging.DEBUG


@pytest.mark.parametrize("raw", [4, 8, None, "\x00\x00\x00\x00"])
def test_codec_from_sql_should_refuse_non_buffer_input(codec: TemporalCodec, raw: object) -> None:
    with pytest.raises(TypeError):
        codec.from_sql("date", raw)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        codec.from_sql(SqlType.TIMESTAMP, raw)  # type: ignore[arg-type]


def test_codec_from_sql_should_accept_memoryview(codec: TemporalCodec) -> None:
    raw = memoryview(struct.pack("!q", -946_684_800_000_000))
    assert codec.from_sql(SqlType.TIMESTAMP, raw) == datetime(1970, 1, 1)


@pytest.mark.parametrize("sql_type", [None, 1, b"date"])
def test_codec_should_refuse_non_string_type_names(codec: TemporalCodec, sql_type: object) -> None:
    with pytest.raises(TypeError):
        codec.to_sql(sql_type, date(2000, 1, 1))  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        codec.from_sql(sql_type, b"\x00\x00\x00\x00")  # type: ignore[arg-type]

"""Raw column bytes <-> wire offset integers.

PostgreSQL's binary protocol sends ``date`` as a big-endian int32 and
``time``/``timestamp``/``timestamptz`` as big-endian int64. The dataclasses
below are the offset representation the value codecs translate to and from;
the ``*_to_sql`` / ``*_from_sql`` helpers compose both layers.
"""
from __future__ import annotations

import struct
from dataclasses import dataclass
from datetime import date, datetime, time, tzinfo

from pgtemporal.core.enums import NaiveTimestamptzPolicy, SqlType, TimeOverflowPolicy
from pgtemporal.core.errors import EncodingOverflow, WireFormatError

from .date_codec import decode_date, encode_date
from .time_codec import decode_time, encode_time
from .timestamp_codec import decode_timestamp, encode_timestamp
from .timestamptz_codec import decode_timestamptz, encode_timestamptz

_INT32 = struct.Struct("!i")
_INT64 = struct.Struct("!q")


def _pack(sql_type: SqlType, fmt: struct.Struct, offset: int) -> bytes:
    try:
        return fmt.pack(offset)
    except struct.error as exc:
        raise EncodingOverflow(sql_type, offset, f"does not fit {fmt.size * 8}-bit wire integer: {exc}") from exc


def _unpack(sql_type: SqlType, fmt: struct.Struct, raw: bytes) -> int:
    if not isinstance(raw, (bytes, bytearray, memoryview)):
        raise TypeError(f"pg {sql_type.value} expects column bytes, got {type(raw).__name__}")
    raw = bytes(raw)
    if len(raw) != fmt.size:
        raise WireFormatError(f"pg {sql_type.value} expects {fmt.size} bytes, got {len(raw)}")
    (offset,) = fmt.unpack(raw)
    return offset


@dataclass(frozen=True, slots=True)
class PgDate:
    """Days relative to 2000-01-01."""

    days: int

    def to_bytes(self) -> bytes:
        return _pack(SqlType.DATE, _INT32, self.days)

    @classmethod
    def from_bytes(cls, raw: bytes) -> "PgDate":
        return cls(_unpack(SqlType.DATE, _INT32, raw))


@dataclass(frozen=True, slots=True)
class PgTime:
    """Microseconds since midnight."""

    microseconds: int

    def to_bytes(self) -> bytes:
        return _pack(SqlType.TIME, _INT64, self.microseconds)

    @classmethod
    def from_bytes(cls, raw: bytes) -> "PgTime":
        return cls(_unpack(SqlType.TIME, _INT64, raw))


@dataclass(frozen=True, slots=True)
class PgTimestamp:
    """Microseconds relative to 2000-01-01T00:00:00; shared by timestamp and timestamptz."""

    microseconds: int

    def to_bytes(self, sql_type: SqlType = SqlType.TIMESTAMP) -> bytes:
        return _pack(sql_type, _INT64, self.microseconds)

    @classmethod
    def from_bytes(cls, raw: bytes, sql_type: SqlType = SqlType.TIMESTAMP) -> "PgTimestamp":
        return cls(_unpack(sql_type, _INT64, raw))


def date_to_sql(value: date) -> bytes:
    return PgDate(encode_date(value)).to_bytes()


def date_from_sql(raw: bytes) -> date:
    return decode_date(PgDate.from_bytes(raw).days)


def time_to_sql(value: time) -> bytes:
    return PgTime(encode_time(value)).to_bytes()


def time_from_sql(raw: bytes, policy: TimeOverflowPolicy | str = TimeOverflowPolicy.REJECT) -> time:
    return decode_time(PgTime.from_bytes(raw).microseconds, policy)


def timestamp_to_sql(value: datetime) -> bytes:
    return PgTimestamp(encode_timestamp(value)).to_bytes()


def timestamp_from_sql(raw: bytes) -> datetime:
    return decode_timestamp(PgTimestamp.from_bytes(raw).microseconds)


def timestamptz_to_sql(
    value: datetime,
    policy: NaiveTimestamptzPolicy | str = NaiveTimestamptzPolicy.ASSUME_UTC,
) -> bytes:
    return PgTimestamp(encode_timestamptz(value, policy)).to_bytes(SqlType.TIMESTAMPTZ)


def timestamptz_from_sql(raw: bytes, display_zone: tzinfo | None = None) -> datetime:
    offset = PgTimestamp.from_bytes(raw, SqlType.TIMESTAMPTZ).microseconds
    return decode_timestamptz(offset, display_zone)

"""Encode/decode pairs for pg date, time, timestamp and timestamptz."""

from .date_codec import decode_date, encode_date
from .epoch import PG_EPOCH, PG_EPOCH_DATE
from .temporal_codec import TemporalCodec
from .time_codec import decode_time, encode_time
from .timestamp_codec import decode_timestamp, encode_timestamp
from .timestamptz_codec import decode_timestamptz, decode_timestamptz_naive, encode_timestamptz
from .wire import (
    PgDate,
    PgTime,
    PgTimestamp,
    date_from_sql,
    date_to_sql,
    time_from_sql,
    time_to_sql,
    timestamp_from_sql,
    timestamp_to_sql,
    timestamptz_from_sql,
    timestamptz_to_sql,
)

__all__ = [
    "PG_EPOCH",
    "PG_EPOCH_DATE",
    "PgDate",
    "PgTime",
    "PgTimestamp",
    "TemporalCodec",
    "date_from_sql",
    "date_to_sql",
    "decode_date",
    "decode_time",
    "decode_timestamp",
    "decode_timestamptz",
    "decode_timestamptz_naive",
    "encode_date",
    "encode_time",
    "encode_timestamp",
    "encode_timestamptz",
    "time_from_sql",
    "time_to_sql",
    "timestamp_from_sql",
    "timestamp_to_sql",
    "timestamptz_from_sql",
    "timestamptz_to_sql",
]

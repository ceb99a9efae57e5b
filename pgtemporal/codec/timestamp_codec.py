"""Naive datetime <-> microseconds relative to 2000-01-01T00:00:00.

This codec never touches zones; the timestamptz codec normalizes to UTC first
and then delegates here.
"""
from __future__ import annotations

import logging
from datetime import datetime, timedelta

from pgtemporal.core.enums import SqlType
from pgtemporal.core.errors import DecodingOverflow
from pgtemporal.core.types import INT64_MAX, INT64_MIN, MICROS_PER_SECOND, SECONDS_PER_DAY, WireTimestamp

from .epoch import PG_EPOCH, ensure_fits

logger = logging.getLogger("pgtemporal.codec.timestamp")


def encode_timestamp(value: datetime) -> WireTimestamp:
    """Return the signed microsecond count between ``value`` and the pg epoch."""

    if not isinstance(value, datetime):
        raise TypeError(f"Expected datetime.datetime, got {type(value).__name__}")
    if value.tzinfo is not None:
        raise ValueError(f"pg timestamp expects a naive datetime, got {value!r}; use encode_timestamptz")
    delta = value - PG_EPOCH
    micros = (delta.days * SECONDS_PER_DAY + delta.seconds) * MICROS_PER_SECOND + delta.microseconds
    return WireTimestamp(ensure_fits(SqlType.TIMESTAMP, value, micros, INT64_MIN, INT64_MAX))


def decode_timestamp(offset: int) -> datetime:
    """Add ``offset`` microseconds to the pg epoch."""

    try:
        return PG_EPOCH + timedelta(microseconds=offset)
    except OverflowError as exc:
        logger.debug("Timestamp offset out of calendar range", extra={"offset": offset, "error": str(exc)})
        raise DecodingOverflow(
            SqlType.TIMESTAMP,
            offset,
            f"tried to deserialize a timestamp too large for datetime: {exc}",
        ) from exc

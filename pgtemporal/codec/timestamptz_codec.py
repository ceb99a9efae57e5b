"""Zoned datetime <-> UTC-normalized microseconds relative to the pg epoch.

PostgreSQL stores timestamptz as a UTC instant with no zone on the wire, so
two datetimes describing the same instant in different zones encode to the
same integer.
"""
from __future__ import annotations

import logging
from datetime import datetime, tzinfo

from pgtemporal.core.enums import NaiveTimestamptzPolicy, SqlType
from pgtemporal.core.errors import DecodingOverflow, EncodingOverflow, TimezoneAttachmentError
from pgtemporal.core.time_utils import attach_utc, is_aware, to_utc_naive
from pgtemporal.core.types import WireTimestamp

from .timestamp_codec import decode_timestamp, encode_timestamp

logger = logging.getLogger("pgtemporal.codec.timestamptz")


def encode_timestamptz(
    value: datetime,
    policy: NaiveTimestamptzPolicy | str = NaiveTimestamptzPolicy.ASSUME_UTC,
) -> WireTimestamp:
    """Normalize ``value`` to UTC and encode it as a pg timestamp.

    Naive datetimes are taken as UTC wall time under ``ASSUME_UTC`` and refused
    under ``REJECT``.
    """

    if not isinstance(value, datetime):
        raise TypeError(f"Expected datetime.datetime, got {type(value).__name__}")
    policy = NaiveTimestamptzPolicy(policy)
    if is_aware(value):
        try:
            naive = to_utc_naive(value)
        except OverflowError as exc:
            logger.debug("UTC normalization overflowed", extra={"value": value.isoformat(), "error": str(exc)})
            raise EncodingOverflow(SqlType.TIMESTAMPTZ, value, f"normalizing to UTC failed: {exc}") from exc
    elif policy is NaiveTimestamptzPolicy.REJECT:
        raise ValueError(f"pg timestamptz expects a timezone-aware datetime, got {value!r}")
    else:
        naive = value.replace(tzinfo=None)
    try:
        return encode_timestamp(naive)
    except EncodingOverflow as exc:
        raise EncodingOverflow(SqlType.TIMESTAMPTZ, value, exc.reason) from exc


def decode_timestamptz_naive(offset: int) -> datetime:
    """Decode ``offset`` to the naive UTC wall time of the instant."""

    try:
        return decode_timestamp(offset)
    except DecodingOverflow as exc:
        raise DecodingOverflow(SqlType.TIMESTAMPTZ, offset, exc.reason) from exc


def decode_timestamptz(offset: int, display_zone: tzinfo | None = None) -> datetime:
    """Decode ``offset`` to an aware datetime in UTC, or in ``display_zone`` if given."""

    naive = decode_timestamptz_naive(offset)
    try:
        aware = attach_utc(naive)
    except ValueError as exc:
        raise TimezoneAttachmentError(offset, str(exc)) from exc
    if display_zone is None:
        return aware
    try:
        return aware.astimezone(display_zone)
    except OverflowError as exc:
        logger.debug(
            "Display zone conversion overflowed",
            extra={"offset": offset, "zone": str(display_zone), "error": str(exc)},
        )
        raise TimezoneAttachmentError(offset, str(exc), zone=str(display_zone)) from exc

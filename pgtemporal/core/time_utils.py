"""Utilities for dealing with timezones and naive/aware datetimes.

The timestamptz codec is the only place zones matter: values are normalized to
UTC before encoding and UTC is attached after decoding. The helpers below are
the single source of truth for those steps.
"""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

_ZERO = timedelta(0)


def is_aware(dt: datetime) -> bool:
    """Return True when ``dt`` carries a usable UTC offset."""

    return dt.tzinfo is not None and dt.utcoffset() is not None


def get_zone(name: str) -> ZoneInfo:
    """Return the ZoneInfo object for ``name`` or raise ValueError."""

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"Unknown time zone: {name!r}") from exc


def to_utc_naive(dt: datetime) -> datetime:
    """Re-express an aware datetime in UTC and drop the zone.

    The instant is preserved; only the displayed offset changes. Raises
    OverflowError when the UTC wall time falls outside ``datetime`` range.
    """

    if not is_aware(dt):
        raise ValueError("Datetime must be timezone-aware before normalization")
    return dt.astimezone(timezone.utc).replace(tzinfo=None)


def attach_utc(naive: datetime) -> datetime:
    """Interpret a naive datetime as UTC wall time.

    Raises ValueError if the input already carries a zone or if the attached
    zone does not report a zero offset.
    """

    if naive.tzinfo is not None:
        raise ValueError(f"expected a naive datetime, got one with tzinfo {naive.tzinfo!r}")
    aware = naive.replace(tzinfo=timezone.utc)
    if aware.utcoffset() != _ZERO:
        raise ValueError(f"UTC offset of {aware!r} is not zero")
    return aware

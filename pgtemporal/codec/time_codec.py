"""Time of day <-> microseconds since midnight.

PostgreSQL accepts ``24:00:00`` for ``time`` columns, which arrives as exactly
one day of microseconds; :class:`datetime.time` stops at ``23:59:59.999999``.
Offsets outside ``[0, MICROS_PER_DAY)`` are therefore handled by an explicit
:class:`TimeOverflowPolicy` instead of being assumed unreachable.
"""
from __future__ import annotations

import logging
from datetime import time

from pgtemporal.core.enums import SqlType, TimeOverflowPolicy
from pgtemporal.core.errors import DecodingOverflow
from pgtemporal.core.types import INT64_MAX, INT64_MIN, MICROS_PER_DAY, MICROS_PER_SECOND, WireTime

from .epoch import ensure_fits

logger = logging.getLogger("pgtemporal.codec.time")


def encode_time(value: time) -> WireTime:
    """Return the exact microsecond count between midnight and ``value``."""

    if not isinstance(value, time):
        raise TypeError(f"Expected datetime.time, got {type(value).__name__}")
    if value.tzinfo is not None:
        raise ValueError(f"pg time carries no zone, got {value!r}")
    seconds = (value.hour * 60 + value.minute) * 60 + value.second
    micros = seconds * MICROS_PER_SECOND + value.microsecond
    return WireTime(ensure_fits(SqlType.TIME, value, micros, INT64_MIN, INT64_MAX))


def decode_time(
    offset: int,
    policy: TimeOverflowPolicy | str = TimeOverflowPolicy.REJECT,
) -> time:
    """Add ``offset`` microseconds to midnight.

    With ``REJECT`` an offset outside one day raises DecodingOverflow; with
    ``WRAP`` it is reduced modulo one day.
    """

    policy = TimeOverflowPolicy(policy)
    micros = offset
    if not 0 <= micros < MICROS_PER_DAY:
        logger.debug(
            "Time offset outside one day",
            extra={"offset": offset, "policy": policy.value},
        )
        if policy is not TimeOverflowPolicy.WRAP:
            raise DecodingOverflow(
                SqlType.TIME,
                offset,
                f"{offset} microseconds is outside a single day [0, {MICROS_PER_DAY})",
            )
        micros %= MICROS_PER_DAY
    seconds, microsecond = divmod(micros, MICROS_PER_SECOND)
    minutes, second = divmod(seconds, 60)
    hour, minute = divmod(minutes, 60)
    return time(hour, minute, second, microsecond)

"""Date <-> day count relative to 2000-01-01."""
from __future__ import annotations

import logging
from datetime import date, datetime, timedelta

from pgtemporal.core.enums import SqlType
from pgtemporal.core.errors import DecodingOverflow
from pgtemporal.core.types import INT32_MAX, INT32_MIN, WireDate

from .epoch import PG_EPOCH_DATE, ensure_fits

logger = logging.getLogger("pgtemporal.codec.date")


def encode_date(value: date) -> WireDate:
    """Return the signed whole-day count between ``value`` and 2000-01-01.

    ``datetime`` instances are refused: their time part would be a fractional
    day, which the wire format cannot carry.
    """

    if isinstance(value, datetime):
        raise TypeError(f"Expected a date without time part, got datetime {value!r}")
    if not isinstance(value, date):
        raise TypeError(f"Expected datetime.date, got {type(value).__name__}")
    days = (value - PG_EPOCH_DATE).days
    return WireDate(ensure_fits(SqlType.DATE, value, days, INT32_MIN, INT32_MAX))


def decode_date(offset: int) -> date:
    """Add ``offset`` whole days to 2000-01-01."""

    try:
        return PG_EPOCH_DATE + timedelta(days=offset)
    except OverflowError as exc:
        logger.debug("Date offset out of calendar range", extra={"offset": offset, "error": str(exc)})
        raise DecodingOverflow(
            SqlType.DATE,
            offset,
            f"could not add {offset} days to {PG_EPOCH_DATE.isoformat()}: {exc}",
        ) from exc

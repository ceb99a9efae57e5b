"""Reference points of the PostgreSQL wire format and the width guard.

PostgreSQL counts dates and timestamps from 2000-01-01 rather than from the
Unix epoch; every codec offset is relative to one of the constants below.
"""
from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any

from pgtemporal.core.enums import SqlType
from pgtemporal.core.errors import EncodingOverflow

PG_EPOCH_DATE = date(2000, 1, 1)
PG_EPOCH = datetime(2000, 1, 1, 0, 0, 0, 0)

logger = logging.getLogger("pgtemporal.codec")


def ensure_fits(sql_type: SqlType, value: Any, offset: int, low: int, high: int) -> int:
    """Return ``offset`` unchanged or raise EncodingOverflow if it is outside ``[low, high]``."""

    if low <= offset <= high:
        return offset
    logger.debug(
        "Encoded offset exceeds wire width",
        extra={"sql_type": sql_type.value, "offset": offset, "low": low, "high": high},
    )
    raise EncodingOverflow(
        sql_type,
        value,
        f"offset {offset} does not fit the wire range [{low}, {high}]",
    )

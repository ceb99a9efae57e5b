"""Type aliases for the integers carried on the wire.

Each PostgreSQL temporal type travels as a plain signed integer; the aliases
keep day counts and microsecond counts from being mixed up between codecs.
"""
from __future__ import annotations

from typing import NewType

WireDate = NewType("WireDate", int)
WireTime = NewType("WireTime", int)
WireTimestamp = NewType("WireTimestamp", int)

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

MICROS_PER_SECOND = 1_000_000
SECONDS_PER_DAY = 86_400
MICROS_PER_DAY = SECONDS_PER_DAY * MICROS_PER_SECOND  # 86_400_000_000

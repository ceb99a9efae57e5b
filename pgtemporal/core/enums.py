"""Enumerations shared across codec subsystems.

They live in the core package so the config models and the codecs can both
import them without introducing circular dependencies.
"""
from __future__ import annotations

from enum import Enum


class SqlType(str, Enum):
    """PostgreSQL temporal column types handled by the codec."""

    DATE = "date"
    TIME = "time"
    TIMESTAMP = "timestamp"
    TIMESTAMPTZ = "timestamptz"

    @classmethod
    def from_value(cls, value: str) -> "SqlType":
        """Map a type name (case-insensitive) to the enum member."""

        normalized = value.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"Unsupported SQL type: {value}")


class TimeOverflowPolicy(str, Enum):
    """What ``decode_time`` does with offsets outside one day."""

    REJECT = "reject"
    WRAP = "wrap"  # modulo one day


class NaiveTimestamptzPolicy(str, Enum):
    """How zone-less datetimes are treated when bound to a timestamptz column."""

    ASSUME_UTC = "assume_utc"
    REJECT = "reject"

"""Error hierarchy shared by the codec subsystems.

Every failure is deterministic and scoped to a single encode/decode call, so
callers only need to tell apart the direction that failed (encoding a Python
value vs. decoding a wire integer) and the SQL type involved. Submodules should
raise the most specific error available and chain the underlying exception.
"""
from __future__ import annotations

from typing import Any

from .enums import SqlType


class TemporalCodecError(Exception):
    """Base class for all custom exceptions in the package."""


class ConfigurationError(TemporalCodecError):
    """Raised when configuration files are missing or invalid."""


class WireFormatError(TemporalCodecError):
    """Raised when raw column bytes do not match the width of the SQL type."""


class EncodingOverflow(TemporalCodecError):
    """Raised when a value cannot be expressed relative to the wire epoch.

    Either the offset does not fit the wire integer width or it needs more
    precision than the wire format carries.
    """

    def __init__(self, sql_type: SqlType, value: Any, reason: str) -> None:
        self.sql_type = sql_type
        self.value = value
        self.reason = reason
        super().__init__(f"Cannot encode {value!r} as pg {sql_type.value}: {reason}")


class DecodingOverflow(TemporalCodecError):
    """Raised when a wire offset applied to the epoch leaves the target type's range."""

    def __init__(self, sql_type: SqlType, offset: int, reason: str, message: str | None = None) -> None:
        self.sql_type = sql_type
        self.offset = offset
        self.reason = reason
        super().__init__(message or f"Cannot decode pg {sql_type.value} offset {offset}: {reason}")


class TimezoneAttachmentError(DecodingOverflow):
    """Raised when a decoded naive value cannot be expressed in UTC or the display zone."""

    def __init__(self, offset: int, reason: str, zone: str = "UTC") -> None:
        self.zone = zone
        super().__init__(
            SqlType.TIMESTAMPTZ,
            offset,
            reason,
            message=f"Pg timestamptz offset {offset} could not be expressed in {zone}: {reason}",
        )

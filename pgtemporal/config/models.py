"""Typed configuration models for the temporal codec.

The config subsystem relies on pydantic to validate YAML files and to provide
a frozen settings object to :class:`pgtemporal.codec.TemporalCodec`.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pgtemporal.core.enums import NaiveTimestamptzPolicy, TimeOverflowPolicy
from pgtemporal.core.time_utils import get_zone

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class CodecConfig(BaseModel):
    """Behaviour switches for the boundary cases of the wire contract.

    ``time_overflow`` decides what happens to time offsets outside one day,
    ``naive_timestamptz`` whether zone-less datetimes may be stored in a
    timestamptz column, and ``display_timezone`` which zone decoded
    timestamptz values are returned in (UTC when unset).
    """

    time_overflow: TimeOverflowPolicy = TimeOverflowPolicy.REJECT
    naive_timestamptz: NaiveTimestamptzPolicy = NaiveTimestamptzPolicy.ASSUME_UTC
    display_timezone: Optional[str] = None
    log_level: str = Field("INFO")

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("display_timezone")
    @classmethod
    def _check_zone(cls, value: Optional[str]) -> Optional[str]:
        if value is not None:
            get_zone(value)
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unsupported log level: {value}")
        return level

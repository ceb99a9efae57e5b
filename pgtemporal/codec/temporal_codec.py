"""TemporalCodec binding the four value codecs to a CodecConfig."""
from __future__ import annotations

import logging
from datetime import date, datetime, time, tzinfo
from pathlib import Path
from typing import Any, Callable, Dict

from pgtemporal.config.loader import load_codec_config
from pgtemporal.config.models import CodecConfig
from pgtemporal.core.enums import SqlType
from pgtemporal.core.time_utils import get_zone
from pgtemporal.core.types import WireDate, WireTime, WireTimestamp

from . import date_codec, time_codec, timestamp_codec, timestamptz_codec, wire


class TemporalCodec:
    """Encodes and decodes pg temporal values with the configured boundary policies.

    Instances hold only the frozen config and a resolved display zone, so one
    codec can be shared between threads.
    """

    def __init__(self, config: CodecConfig | None = None) -> None:
        self.config = config or CodecConfig()
        self.logger = logging.getLogger("pgtemporal.codec")
        self.display_zone: tzinfo | None = None
        if self.config.display_timezone:
            self.display_zone = get_zone(self.config.display_timezone)
        self._encoders: Dict[SqlType, Callable[[Any], bytes]] = {
            SqlType.DATE: wire.date_to_sql,
            SqlType.TIME: wire.time_to_sql,
            SqlType.TIMESTAMP: wire.timestamp_to_sql,
            SqlType.TIMESTAMPTZ: lambda value: wire.timestamptz_to_sql(value, self.config.naive_timestamptz),
        }
        self._decoders: Dict[SqlType, Callable[[bytes], Any]] = {
            SqlType.DATE: wire.date_from_sql,
            SqlType.TIME: lambda raw: wire.time_from_sql(raw, self.config.time_overflow),
            SqlType.TIMESTAMP: wire.timestamp_from_sql,
            SqlType.TIMESTAMPTZ: lambda raw: wire.timestamptz_from_sql(raw, self.display_zone),
        }

    @classmethod
    def from_yaml(cls, path: Path | str) -> "TemporalCodec":
        """Build a codec from codec.yml and apply its log level to the package logger."""

        config = load_codec_config(path)
        logging.getLogger("pgtemporal").setLevel(config.log_level)
        return cls(config)

    # ------------------------------------------------------------------
    # Value <-> wire offset
    # ------------------------------------------------------------------
    def encode_date(self, value: date) -> WireDate:
        return date_codec.encode_date(value)

    def decode_date(self, offset: int) -> date:
        return date_codec.decode_date(offset)

    def encode_time(self, value: time) -> WireTime:
        return time_codec.encode_time(value)

    def decode_time(self, offset: int) -> time:
        return time_codec.decode_time(offset, self.config.time_overflow)

    def encode_timestamp(self, value: datetime) -> WireTimestamp:
        return timestamp_codec.encode_timestamp(value)

    def decode_timestamp(self, offset: int) -> datetime:
        return timestamp_codec.decode_timestamp(offset)

    def encode_timestamptz(self, value: datetime) -> WireTimestamp:
        return timestamptz_codec.encode_timestamptz(value, self.config.naive_timestamptz)

    def decode_timestamptz(self, offset: int) -> datetime:
        return timestamptz_codec.decode_timestamptz(offset, self.display_zone)

    # ------------------------------------------------------------------
    # Value <-> column bytes
    # ------------------------------------------------------------------
    def to_sql(self, sql_type: SqlType | str, value: Any) -> bytes:
        """Encode ``value`` into the binary column representation of ``sql_type``."""

        kind = _coerce_type(sql_type)
        raw = self._encoders[kind](value)
        self.logger.debug("Encoded temporal value", extra={"sql_type": kind.value, "size": len(raw)})
        return raw

    def from_sql(self, sql_type: SqlType | str, raw: bytes) -> Any:
        """Decode binary column bytes of ``sql_type`` into a Python value."""

        kind = _coerce_type(sql_type)
        return self._decoders[kind](raw)


def _coerce_type(sql_type: SqlType | str) -> SqlType:
    if isinstance(sql_type, SqlType):
        return sql_type
    if not isinstance(sql_type, str):
        raise TypeError(f"sql_type must be a SqlType or str, got {type(sql_type).__name__}")
    return SqlType.from_value(sql_type)

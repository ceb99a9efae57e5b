from __future__ import annotations

import pytest
from pydantic import ValidationError

from pgtemporal.config.models import CodecConfig
from pgtemporal.core.enums import NaiveTimestamptzPolicy, TimeOverflowPolicy


def test_codec_config_should_apply_defaults() -> None:
    config = CodecConfig()
    assert config.time_overflow is TimeOverflowPolicy.REJECT
    assert config.naive_timestamptz is NaiveTimestamptzPolicy.ASSUME_UTC
    assert config.display_timezone is None
    assert config.log_level == "INFO"


def test_codec_config_should_be_frozen() -> None:
    config = CodecConfig()
    with pytest.raises(ValidationError):
        config.time_overflow = TimeOverflowPolicy.WRAP  # type: ignore[misc]


def test_codec_config_should_validate_display_timezone() -> None:
    assert CodecConfig(display_timezone="UTC").display_timezone == "UTC"
    with pytest.raises(ValidationError):
        CodecConfig(display_timezone="Mars/Olympus_Mons")


def test_codec_config_should_validate_log_level() -> None:
    assert CodecConfig(log_level="debug").log_level == "DEBUG"
    with pytest.raises(ValidationError):
        CodecConfig(log_level="chatty")


def test_codec_config_should_forbid_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        CodecConfig(interval_style="iso_8601")

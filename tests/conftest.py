from __future__ import annotations

import logging
from datetime import timedelta, timezone
from pathlib import Path
from textwrap import dedent
from typing import Callable, Iterator

import pytest

from pgtemporal.codec import TemporalCodec
from pgtemporal.config.models import CodecConfig
from pgtemporal.core.enums import TimeOverflowPolicy


@pytest.fixture(scope="session")
def plus_one() -> timezone:
    return timezone(timedelta(hours=1))


@pytest.fixture
def codec() -> TemporalCodec:
    return TemporalCodec()


@pytest.fixture
def wrapping_codec() -> TemporalCodec:
    return TemporalCodec(CodecConfig(time_overflow=TimeOverflowPolicy.WRAP))


@pytest.fixture
def write_yaml(tmp_path: Path) -> Callable[[str, str], Path]:
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(dedent(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def restore_package_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger("pgtemporal")
    level, propagate = logger.level, logger.propagate
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)
    logger.propagate = propagate

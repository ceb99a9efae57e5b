"""YAML loader for the codec config.

The file may either hold the :class:`CodecConfig` fields at the root or nest
them under a ``codec:`` key so it can share a file with other settings.
"""
from __future__ import annotations

from pathlib import Path
from typing import Mapping

import yaml

from pgtemporal.core.errors import ConfigurationError

from .models import CodecConfig

_DEFAULT_CONFIG_PATH = Path("config") / "codec.yml"


def _read_yaml(path: Path) -> Mapping:
    """Read a YAML file and return a mapping (empty dict if file is blank)."""

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as fp:
        try:
            data = yaml.safe_load(fp) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, Mapping):
        raise ValueError(f"YAML root must be a mapping in {path}")
    return data


def load_codec_config(path: Path | str = _DEFAULT_CONFIG_PATH) -> CodecConfig:
    """Load codec.yml (time overflow policy, naive timestamptz policy, display zone)."""

    data = _read_yaml(Path(path))
    section = data.get("codec", data)
    if not isinstance(section, Mapping):
        raise ValueError(f"`codec` must be a mapping in {path}")
    return CodecConfig.model_validate(dict(section))

"""Configuration loading and validation package."""

from .loader import load_codec_config
from .models import CodecConfig

__all__ = ["CodecConfig", "load_codec_config"]

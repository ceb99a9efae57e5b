"""Core primitives shared by the codec, config and telemetry packages.

Enums, wire integer aliases, error classes and time-zone helpers live here so
the codec modules can import them without circular dependencies.
"""

from . import enums, errors, time_utils, types

__all__ = ["enums", "errors", "time_utils", "types"]

"""Domain layer: the greeting itself, free of I/O and frameworks."""

from __future__ import annotations

from .behaviors import CANONICAL_GREETING, build_greeting
from .enums import OutputFormat
from .errors import ConfigurationError

__all__ = [
    "CANONICAL_GREETING",
    "ConfigurationError",
    "OutputFormat",
    "build_greeting",
]

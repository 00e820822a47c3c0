"""Enumerations used by the read-only ``config`` view."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """How ``hello-world config`` renders the merged configuration.

    Members are strings so a Click choice value compares equal to them.

    Example:
        >>> OutputFormat("json") is OutputFormat.JSON
        True
        >>> OutputFormat.HUMAN == "human"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = ["OutputFormat"]

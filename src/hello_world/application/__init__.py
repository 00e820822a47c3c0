"""Application layer: the ports the CLI depends on."""

from __future__ import annotations

from .ports import DisplayConfig, GetConfig, InitLogging

__all__ = ["DisplayConfig", "GetConfig", "InitLogging"]

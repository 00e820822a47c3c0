"""Adapters: Click CLI, lib_layered_config configuration, lib_log_rich logging."""

from __future__ import annotations

__all__: list[str] = []

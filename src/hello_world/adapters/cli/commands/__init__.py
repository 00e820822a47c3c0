"""Subcommands registered on the ``hello-world`` group."""

from __future__ import annotations

from .config import cli_config
from .greeting import cli_fail, cli_hello, cli_info

__all__ = ["cli_config", "cli_fail", "cli_hello", "cli_info"]

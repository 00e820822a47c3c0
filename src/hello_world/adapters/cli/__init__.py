"""Command-line interface of hello-world.

Contents:
    * :data:`cli` - the Click group (greets when run bare)
    * :func:`main` - runs the group and returns an exit code
    * :class:`ExitCode` - codes hello-world picks itself
"""

from __future__ import annotations

from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = ["ExitCode", "cli", "main"]

"""State handed from the root command to subcommands, and traceback switches."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from hello_world.composition import AppServices


@dataclass(frozen=True, slots=True)
class CLIContext:
    """What the root command resolved before dispatching.

    ``set_overrides`` stays in raw form so ``config --profile`` can merge it
    again over a different profile.
    """

    services: AppServices
    config: Config
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()
    traceback: bool = False


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Find the :class:`CLIContext` stored by the root command.

    Raises:
        RuntimeError: The command was invoked without the root group.
    """
    cli_ctx = ctx.find_object(CLIContext)
    if cli_ctx is None:
        raise RuntimeError("hello-world subcommands must run under the root command group")
    return cli_ctx


@dataclass(frozen=True, slots=True)
class TracebackFlags:
    """The two traceback switches of ``lib_cli_exit_tools.config``.

    Example:
        >>> before = TracebackFlags.current()
        >>> enable_tracebacks(True)
        >>> TracebackFlags.current()
        TracebackFlags(traceback=True, force_color=True)
        >>> before.apply()
        >>> TracebackFlags.current() == before
        True
    """

    traceback: bool
    force_color: bool

    @classmethod
    def current(cls) -> TracebackFlags:
        settings = lib_cli_exit_tools.config
        return cls(traceback=bool(settings.traceback), force_color=bool(settings.traceback_force_color))

    def apply(self) -> None:
        lib_cli_exit_tools.config.traceback = self.traceback
        lib_cli_exit_tools.config.traceback_force_color = self.force_color


def enable_tracebacks(enabled: bool) -> None:
    """Switch full, coloured tracebacks on or off for the rest of the run."""
    TracebackFlags(traceback=enabled, force_color=enabled).apply()


__all__ = [
    "CLIContext",
    "TracebackFlags",
    "enable_tracebacks",
    "get_cli_context",
]

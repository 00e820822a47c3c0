"""Run the ``hello-world`` group and report how it ended as an exit code.

The console script and ``python -m hello_world`` both call :func:`main`, so
errors are printed and mapped the same way for either.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from hello_world import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import TracebackFlags
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from hello_world.composition import AppServices


def _report_failure(exc: BaseException) -> int:
    """Print the exception being handled and return its exit code."""
    verbose = bool(lib_cli_exit_tools.config.traceback)
    limit = TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT
    lib_cli_exit_tools.print_exception_message(trace_back=verbose, length_limit=limit)
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _invoke(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    from .root import cli

    # lib_cli_exit_tools.run_cli has no way to pass ctx.obj, hence the manual dispatch
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, obj=services_factory, standalone_mode=False)
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:  # SystemExit from commands and KeyboardInterrupt too
        return _report_failure(exc)
    return ExitCode.SUCCESS


def _stop_logging() -> None:
    # the runtime is process-wide; a CLI run inside a worker thread leaves it alone
    if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run hello-world and return the process exit code.

    Args:
        argv: Arguments without the program name; ``None`` reads ``sys.argv``.
        restore_traceback: Put the ``lib_cli_exit_tools`` traceback switches
            back to their state before the run.
        services_factory: Builds the services, normally
            :func:`hello_world.composition.build_production`.

    Returns:
        ``0`` once the greeting (or a subcommand) completed, otherwise the
        code of the failure.

    Raises:
        ValueError: ``services_factory`` is missing.

    Example:
        >>> from hello_world.composition import build_production
        >>> main([], services_factory=build_production)  # doctest: +SKIP
        Hello World!
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required; pass hello_world.composition.build_production")

    flags_before = TracebackFlags.current()
    args = list(argv) if argv is not None else sys.argv[1:]
    try:
        return _invoke(args, services_factory)
    finally:
        if restore_traceback:
            flags_before.apply()
        _stop_logging()


__all__ = ["main"]

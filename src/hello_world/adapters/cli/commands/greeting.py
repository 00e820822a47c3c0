"""Commands that print something: the greeting, metadata, a deliberate failure."""

from __future__ import annotations

import logging
from contextlib import AbstractContextManager
from typing import Any

import lib_log_rich.runtime
import rich_click as click

from hello_world import __init__conf__
from hello_world.domain.behaviors import build_greeting

from ..constants import CLICK_CONTEXT_SETTINGS

logger = logging.getLogger(__name__)


def _job(command: str) -> AbstractContextManager[Any]:
    return lib_log_rich.runtime.bind(job_id=f"cli-{command}", extra={"command": command})


@click.command("hello", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_hello() -> None:
    """Print "Hello World!" (the same as running hello-world bare)."""
    with _job("hello"):
        logger.info("Printing greeting")
        click.echo(build_greeting())


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Show name, version and homepage of the installed package."""
    with _job("info"):
        __init__conf__.print_info()


@click.command("fail", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_fail() -> None:
    """Raise RuntimeError to try out --traceback and the error exit code."""
    with _job("fail"):
        logger.warning("Failing on request")
        raise RuntimeError("I should fail")


__all__ = ["cli_fail", "cli_hello", "cli_info"]

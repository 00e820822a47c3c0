"""The ``hello-world`` command group.

Run bare, the group prints the greeting. Before that, or before any
subcommand, it loads configuration and starts logging.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from hello_world import __init__conf__
from hello_world.domain.errors import ConfigurationError

from .commands import cli_config, cli_fail, cli_hello, cli_info
from .constants import CLICK_CONTEXT_SETTINGS
from .context import CLIContext, enable_tracebacks
from .exit_codes import ExitCode
from .settings import load_config

if TYPE_CHECKING:
    from hello_world.composition import AppServices


def _start_logging(services: AppServices, config: Config) -> None:
    try:
        services.init_logging(config)
    except ConfigurationError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


@click.group(help=__init__conf__.title, context_settings=CLICK_CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option("--traceback/--no-traceback", default=False, help="Print the full traceback when a command fails")
@click.option("--profile", default=None, metavar="NAME", help="Read configuration from profile NAME")
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override one configuration value for this run (repeatable)",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Print the greeting, or run one of the commands below.

    ``ctx.obj`` must be a services factory; the group replaces it with a
    :class:`CLIContext` for the subcommands.

    Example:
        >>> from click.testing import CliRunner
        >>> from hello_world.composition import build_production
        >>> result = CliRunner().invoke(cli, [], obj=build_production)
        >>> result.exit_code, result.stdout
        (0, 'Hello World!\\n')
    """
    services_factory = ctx.obj
    if not callable(services_factory):
        raise RuntimeError("hello-world expects a services factory in ctx.obj; start it via hello_world.entry.main")
    services: AppServices = services_factory()
    config = load_config(services, profile=profile, set_overrides=set_overrides)
    _start_logging(services, config)
    ctx.obj = CLIContext(
        services=services,
        config=config,
        profile=profile,
        set_overrides=set_overrides,
        traceback=traceback,
    )
    enable_tracebacks(traceback)

    if ctx.invoked_subcommand is None:
        ctx.invoke(cli_hello)


for _command in (cli_hello, cli_info, cli_fail, cli_config):
    cli.add_command(_command)


__all__ = ["cli"]

"""``hello-world config``: a read-only view of the merged configuration."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from hello_world.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode
from ..settings import load_config

logger = logging.getLogger(__name__)


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    show_default=True,
    help="Render as TOML-like text or as JSON",
)
@click.option("--section", default=None, metavar="NAME", help="Show only this top-level section")
@click.option("--profile", default=None, metavar="NAME", help="Show profile NAME instead of the root --profile")
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None, profile: str | None) -> None:
    """Show where every setting comes from.

    Layers, lowest first: defaults, app, host, user, .env, environment.
    Root --set overrides apply to whichever profile is shown.
    """
    cli_ctx = get_cli_context(ctx)
    if profile:
        config = load_config(cli_ctx.services, profile=profile, set_overrides=cli_ctx.set_overrides)
    else:
        config, profile = cli_ctx.config, cli_ctx.profile
    fmt = OutputFormat(output_format.lower())

    with lib_log_rich.runtime.bind(job_id="cli-config", extra={"command": "config", "profile": profile}):
        logger.info("Showing configuration", extra={"format": fmt.value, "section": section})
        try:
            cli_ctx.services.display_config(config, output_format=fmt, section=section, profile=profile)
        except ValueError as exc:
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


__all__ = ["cli_config"]

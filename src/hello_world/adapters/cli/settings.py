"""Resolve the configuration a command runs with.

Bad ``--profile`` names and malformed ``--set`` strings are user input
errors, so they leave as :class:`click.UsageError` (exit 2) no matter
whether the root command or a subcommand received them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from hello_world.adapters.config.loader import validate_profile
from hello_world.adapters.config.overrides import apply_overrides

if TYPE_CHECKING:
    from hello_world.composition import AppServices


def load_config(services: AppServices, *, profile: str | None, set_overrides: tuple[str, ...]) -> Config:
    """Load ``profile`` through ``services`` and merge ``set_overrides`` on top.

    Raises:
        click.UsageError: The profile name or an override is malformed.
    """
    if profile is not None:
        try:
            validate_profile(profile)
        except ValueError as exc:
            raise click.UsageError(f"Invalid profile {profile!r}: {exc}") from exc
    config = services.get_config(profile=profile)
    try:
        return apply_overrides(config, set_overrides)
    except (ValueError, TypeError) as exc:
        raise click.UsageError(f"Invalid --set: {exc}") from exc


__all__ = ["load_config"]

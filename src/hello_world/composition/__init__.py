"""Production wiring of the ports used by the CLI."""

from __future__ import annotations

from dataclasses import dataclass

from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config
from ..adapters.logging.setup import init_logging
from ..application.ports import DisplayConfig, GetConfig, InitLogging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Everything the greeting program does besides greeting.

    Frozen; tests derive variants with :func:`dataclasses.replace`.
    """

    get_config: GetConfig
    display_config: DisplayConfig
    init_logging: InitLogging


def build_production() -> AppServices:
    """Return services backed by lib_layered_config and lib_log_rich.

    Example:
        >>> build_production().init_logging is init_logging
        True
    """
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        init_logging=init_logging,
    )


__all__ = ["AppServices", "build_production"]

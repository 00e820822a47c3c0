"""Seams between the CLI and the outside world.

The CLI only talks to configuration and logging through these callables.
Production wiring lives in :mod:`hello_world.composition`; tests replace
one port at a time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config


class GetConfig(Protocol):
    """Return the merged configuration for an optional profile."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Print a configuration, optionally one section only.

    Raises ``ValueError`` when ``section`` is not present.
    """

    def __call__(
        self,
        config: Config,
        *,
        output_format: OutputFormat = ...,
        section: str | None = ...,
        profile: str | None = ...,
    ) -> None: ...


class InitLogging(Protocol):
    """Start logging from ``[lib_log_rich]``; raises ``ConfigurationError``."""

    def __call__(self, config: Config) -> None: ...


__all__ = ["DisplayConfig", "GetConfig", "InitLogging"]

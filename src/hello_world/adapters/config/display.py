"""Print a Config with lib_layered_config's Rich renderer."""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as RenderFormat
from lib_layered_config import display_config as render_config
from rich.console import Console

from hello_world.domain.enums import OutputFormat


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
    console: Console | None = None,
) -> None:
    """Render ``config`` (or one top-level ``section`` of it) to ``console``.

    Human output looks like TOML with provenance comments naming the layer,
    file and ``profile`` each value came from; JSON output is plain data.

    Raises:
        ValueError: ``section`` is not a key of ``config``.
    """
    # queued log records must not land inside the rendered table
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()
    render_config(
        config,
        output_format=RenderFormat(output_format.value),
        section=section,
        profile=profile,
        console=console,
    )


__all__ = ["display_config"]

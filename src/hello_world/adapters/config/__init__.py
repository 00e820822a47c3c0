"""Configuration adapter built on lib_layered_config.

Contents:
    * :mod:`.loader` - cached layered loading and profile validation
    * :mod:`.overrides` - ``--set SECTION.KEY=VALUE`` handling
    * :mod:`.display` - the read-only ``config`` view
"""

from __future__ import annotations

from .display import display_config
from .loader import clear_config_cache, get_config
from .overrides import apply_overrides

__all__ = [
    "apply_overrides",
    "clear_config_cache",
    "display_config",
    "get_config",
]

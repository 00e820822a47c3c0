"""hello_world: print ``Hello World!``.

The package root re-exports the greeting and the metadata printer; the
command line lives in :mod:`hello_world.adapters.cli`.
"""

from __future__ import annotations

from .__init__conf__ import print_info
from .domain.behaviors import CANONICAL_GREETING, build_greeting

__all__ = [
    "CANONICAL_GREETING",
    "build_greeting",
    "print_info",
]

"""Settings shared by every hello-world command."""

from __future__ import annotations

from typing import Final

#: ``-h`` is accepted as a short form of ``--help``.
CLICK_CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}

#: How much of a failure's traceback is printed by default ...
TRACEBACK_SUMMARY_LIMIT: Final[int] = 500

#: ... and with ``--traceback``.
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

__all__ = ["CLICK_CONTEXT_SETTINGS", "TRACEBACK_SUMMARY_LIMIT", "TRACEBACK_VERBOSE_LIMIT"]

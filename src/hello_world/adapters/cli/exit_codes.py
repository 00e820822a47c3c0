"""Exit codes that hello-world chooses itself.

Click reports usage errors with 2, and lib_cli_exit_tools maps any other
unexpected exception to a non-zero code.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Codes raised via ``SystemExit`` or returned by :func:`main`.

    Example:
        >>> int(ExitCode.CONFIG_ERROR)
        78
    """

    SUCCESS = 0
    #: errno EINVAL: ``config --section`` names a missing section.
    INVALID_ARGUMENT = 22
    #: sysexits EX_CONFIG: ``[lib_log_rich]`` cannot start logging.
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]

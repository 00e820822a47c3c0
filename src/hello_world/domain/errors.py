"""Errors the domain reports to the CLI boundary."""

from __future__ import annotations


class ConfigurationError(Exception):
    """The ``[lib_log_rich]`` settings cannot start the logging runtime.

    The root command turns it into ``ExitCode.CONFIG_ERROR`` (78) before
    any greeting is printed.

    Example:
        >>> str(ConfigurationError("[lib_log_rich] must be a table, got str"))
        '[lib_log_rich] must be a table, got str'
    """


__all__ = ["ConfigurationError"]

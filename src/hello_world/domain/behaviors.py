"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

CANONICAL_GREETING = "Hello World!"


def build_greeting() -> str:
    r"""Return the canonical greeting string.

    The greeting takes no input and has no failure modes; every caller,
    from the bare entry point to the ``hello`` subcommand, receives the
    same text.

    Returns:
        The canonical greeting string.

    Example:
        >>> build_greeting()
        'Hello World!'
    """
    return CANONICAL_GREETING


__all__ = [
    "CANONICAL_GREETING",
    "build_greeting",
]

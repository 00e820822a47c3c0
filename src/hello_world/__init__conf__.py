"""Static package metadata surfaced to CLI commands and documentation.

Values are kept in sync with ``pyproject.toml``; ``tests/test_metadata.py``
fails when they drift.
"""

from __future__ import annotations

#: Distribution name as published on the package index.
name = "hello_world"
#: Human-readable summary shown in CLI help output.
title = "Minimal greeting program with a layered CLI"
#: Release version; must match ``[project].version``.
version = "1.0.0"
#: Repository homepage.
homepage = "https://github.com/example/hello_world"
#: Author attribution.
author = "hello_world maintainers"
#: Contact email for support.
author_email = "maintainers@example.com"
#: Console-script name published by the package.
shell_command = "hello-world"

#: Vendor, app and slug identifiers used by lib_layered_config to build
#: platform specific configuration paths.
LAYEREDCONF_VENDOR: str = "hello-world"
LAYEREDCONF_APP: str = "Hello World"
LAYEREDCONF_SLUG: str = "hello-world"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for hello_world:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))

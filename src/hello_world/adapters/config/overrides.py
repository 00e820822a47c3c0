"""``--set SECTION.KEY=VALUE``: one-off configuration values for a single run.

Values are read as JSON when they parse (``true``, ``8``, ``[1, 2]``,
``null``) and as plain strings otherwise, so ``--set
lib_log_rich.console_level=INFO`` needs no quoting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """A parsed ``--set``: the value lands at ``section`` / ``key_path``."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def coerce_value(raw: str) -> CoercedValue:
    """Decode ``raw`` as JSON, or keep it as text when that fails.

    Examples:
        >>> coerce_value("8"), coerce_value("false"), coerce_value("null")
        (8, False, None)
        >>> coerce_value("WARNING")
        'WARNING'
        >>> coerce_value("")
        ''
    """
    if not raw:
        return raw
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError:
        return raw


def parse_override(raw: str) -> ConfigOverride:
    """Split ``raw`` at its first ``=`` and the path at its first dot.

    Raises:
        ValueError: No ``=``, no dot, or an empty path component.

    Examples:
        >>> parse_override("lib_log_rich.payload_limits.max_chars=8192")
        ConfigOverride(section='lib_log_rich', key_path=('payload_limits', 'max_chars'), value=8192)
        >>> parse_override("lib_log_rich")
        Traceback (most recent call last):
        ...
        ValueError: Invalid override 'lib_log_rich': must contain '='
    """
    path, sep, value = raw.partition("=")
    if not sep:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")
    section, dot, rest = path.partition(".")
    if not dot:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    key_path = tuple(rest.split("."))
    if not all(key_path):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")
    return ConfigOverride(section=section, key_path=key_path, value=coerce_value(value))


def _nest_override(tree: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Store ``override`` inside ``tree``, creating tables on the way.

    Raises:
        TypeError: An earlier override put a scalar where a table is needed.
    """
    node: dict[str, object] = tree.setdefault(override.section, {})
    *parents, leaf = override.key_path
    for key in parents:
        child = node.setdefault(key, {})
        if not isinstance(child, dict):
            raise TypeError(f"Expected dict at key {key!r}, got {type(child).__name__}")
        node = cast("dict[str, object]", child)
    node[leaf] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every ``--set`` merged in; later ones win.

    ``config`` itself is returned untouched when there is nothing to merge.

    Raises:
        ValueError: An override string is malformed.
        TypeError: Two overrides disagree on whether a key is a table.

    Example:
        >>> base = Config({"lib_log_rich": {"environment": "prod"}}, {})
        >>> apply_overrides(base, ("lib_log_rich.environment=dev",))["lib_log_rich"]["environment"]
        'dev'
    """
    if not raw_overrides:
        return config
    tree: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _nest_override(tree, parse_override(raw))
    return config.with_overrides(tree)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]

"""Load the layered configuration of hello-world.

lib_layered_config merges, lowest precedence first, the bundled
``defaultconfig.toml``, the app, host and user files, ``.env`` and the
``HELLO_WORLD___*`` environment variables. With a profile, each file layer
is read from a ``profile/<name>/`` subdirectory instead.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from hello_world import __init__conf__

#: Lowest-precedence layer, shipped inside the wheel.
DEFAULT_CONFIG_FILE: Path = Path(__file__).with_name("defaultconfig.toml")


def validate_profile(profile: str) -> None:
    """Raise ``ValueError`` if ``profile`` cannot safely name a directory.

    Example:
        >>> validate_profile("staging")
        >>> try:
        ...     validate_profile("../etc")
        ... except ValueError:
        ...     print("rejected")
        rejected
    """
    validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH)


@lru_cache(maxsize=4)
def _read_layers(profile: str | None, start_dir: str | None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=DEFAULT_CONFIG_FILE,
        start_dir=start_dir,
    )


def get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return the merged configuration, reading the files once per profile.

    Args:
        profile: Optional profile name, e.g. ``staging``.
        start_dir: Directory where ``.env`` lookup starts; defaults to the
            working directory.

    Raises:
        ValueError: ``profile`` is not a valid profile name.

    Example:
        >>> get_config().get("lib_log_rich.no_such_key", default="unset")
        'unset'
    """
    if profile is not None:
        validate_profile(profile)
    return _read_layers(profile, start_dir)


def clear_config_cache() -> None:
    """Forget cached loads; the next :func:`get_config` reads the files again."""
    _read_layers.cache_clear()


__all__ = [
    "DEFAULT_CONFIG_FILE",
    "clear_config_cache",
    "get_config",
    "validate_profile",
]

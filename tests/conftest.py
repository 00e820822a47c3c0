"""Fixtures shared by the hello-world test modules.

The CLI group expects a services factory in ``ctx.obj``. The ``services_*``
fixtures build such factories from the production wiring with one port
swapped, so a test reads ``cli_runner.invoke(cli, [...], obj=factory)``.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator, Mapping
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import lib_log_rich.runtime
import pytest
from click.testing import CliRunner
from dotenv import load_dotenv
from lib_layered_config import Config
from lib_layered_config.domain.config import SourceInfo

from hello_world.adapters.cli.context import TracebackFlags
from hello_world.adapters.config.loader import clear_config_cache as _forget_loaded_config
from hello_world.composition import build_production

if TYPE_CHECKING:
    from hello_world.composition import AppServices

# developer-local settings such as LOG_CONSOLE_LEVEL; absent in CI
load_dotenv(Path(__file__).resolve().parents[1] / ".env", override=False)

_ANSI = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")

ServicesFactory = Callable[[], "AppServices"]


def _swap_ports(**ports: Any) -> ServicesFactory:
    services = replace(build_production(), **ports)
    return lambda: services


def _as_config(data: Mapping[str, Any] | Config) -> Config:
    return data if isinstance(data, Config) else Config(dict(data), {})


@pytest.fixture
def cli_runner() -> CliRunner:
    """A fresh runner; ``result.stdout`` holds only what commands print."""
    return CliRunner()


@pytest.fixture
def production_factory() -> ServicesFactory:
    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    return lambda text: _ANSI.sub("", text)


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Run with tracebacks off, then put the caller's flags back."""
    saved = TracebackFlags.current()
    lib_cli_exit_tools.reset_config()
    TracebackFlags(traceback=False, force_color=False).apply()
    yield
    lib_cli_exit_tools.reset_config()
    saved.apply()


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Forget loaded configuration before and after the test."""
    _forget_loaded_config()
    yield
    _forget_loaded_config()


@pytest.fixture
def logging_runtime_down() -> Iterator[None]:
    """No lib_log_rich runtime is running when the test starts or ends."""
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()
    yield
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Turn a plain dict into a ``Config`` with no provenance."""
    return _as_config


@pytest.fixture
def source_info_factory() -> Callable[..., SourceInfo]:
    def _source(key: str, layer: str, path: str | None = None) -> SourceInfo:
        return {"layer": layer, "path": path, "key": key}

    return _source


@pytest.fixture
def config_cli_context(clear_config_cache: None) -> Callable[[Mapping[str, Any] | Config], ServicesFactory]:
    """Services whose ``get_config`` returns the given data for every profile."""

    def _build(data: Mapping[str, Any] | Config) -> ServicesFactory:
        config = _as_config(data)
        return _swap_ports(get_config=lambda **_kwargs: config)

    return _build


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], ServicesFactory]:
    """Like ``config_cli_context``, and each requested profile is appended to a list."""

    def _build(config: Config, profiles: list[str | None]) -> ServicesFactory:
        def _get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            profiles.append(profile)
            return config

        return _swap_ports(get_config=_get_config)

    return _build


@pytest.fixture
def inject_init_logging() -> Callable[[Callable[[Config], None]], ServicesFactory]:
    """Services that start logging through the given callable."""
    return lambda init: _swap_ports(init_logging=init)

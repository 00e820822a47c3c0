"""Start the lib_log_rich runtime from the ``[lib_log_rich]`` section.

Every way of starting hello-world goes through :func:`init_logging`, and
every problem with the section surfaces as :class:`ConfigurationError`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, ValidationError

from hello_world import __init__conf__
from hello_world.domain.errors import ConfigurationError


class LoggingConfigModel(BaseModel):
    """The ``[lib_log_rich]`` table.

    ``service`` and ``environment`` are typed here; any other key is kept
    and handed to ``RuntimeConfig``, which validates it.

    Example:
        >>> model = LoggingConfigModel(console_level="INFO")
        >>> model.environment, model.model_extra
        ('prod', {'console_level': 'INFO'})
    """

    model_config = ConfigDict(extra="allow")

    service: str | None = None
    environment: str = "prod"


def _runtime_config_from(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Translate ``[lib_log_rich]`` into a ``RuntimeConfig``.

    Raises:
        ConfigurationError: The section is not a table, or a value has the
            wrong type or is rejected by lib_log_rich.
    """
    section: object = config.get("lib_log_rich", default={})
    if not isinstance(section, Mapping):
        raise ConfigurationError(f"[lib_log_rich] must be a table, got {type(section).__name__}")
    try:
        model = LoggingConfigModel.model_validate(dict(cast("Mapping[str, Any]", section)))
        return lib_log_rich.runtime.RuntimeConfig(
            service=model.service or __init__conf__.name,
            environment=model.environment,
            **(model.model_extra or {}),
        )
    except (ValidationError, ValueError, TypeError) as exc:
        raise ConfigurationError(f"[lib_log_rich] is invalid: {exc}") from exc


def init_logging(config: Config) -> None:
    """Start logging once per process; later calls do nothing.

    ``.env`` files are honoured (``LOG_*`` variables), and stdlib
    ``logging`` records are forwarded into lib_log_rich.

    Raises:
        ConfigurationError: ``[lib_log_rich]`` cannot be used.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    runtime_config = _runtime_config_from(config)
    try:
        lib_log_rich.runtime.init(runtime_config)
    except (ValidationError, ValueError) as exc:
        raise ConfigurationError(f"[lib_log_rich] rejected by lib_log_rich: {exc}") from exc
    lib_log_rich.runtime.attach_std_logging()


__all__ = ["LoggingConfigModel", "init_logging"]

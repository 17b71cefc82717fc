"""Centralized lib_log_rich initialization and shutdown for all entry points.

Library code under ``bland`` only ever calls ``logging.getLogger(__name__)``.
The CLI initializes lib_log_rich once from the ``[lib_log_rich]`` section
and bridges stdlib logging into it, so store load/save records show up in
the same console and backends as CLI records.

Contents:
    * :class:`LoggingConfigModel` - validation of the ``[lib_log_rich]`` section.
    * :func:`init_logging` - idempotent runtime initialization.
    * :func:`shutdown_logging` - flush and stop the runtime from the main thread.
"""

from __future__ import annotations

import threading
from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from bland import __init__conf__


class LoggingConfigModel(BaseModel):
    """Pydantic model for the ``[lib_log_rich]`` config section.

    Unknown fields pass through untouched to ``lib_log_rich.RuntimeConfig``.

    Example:
        >>> LoggingConfigModel(service="bland-test").service
        'bland-test'
        >>> LoggingConfigModel().environment
        'prod'
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map the ``[lib_log_rich]`` section onto a RuntimeConfig.

    ``service`` falls back to the package name.
    """
    log_raw: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", log_raw) if log_raw else {})
    passthrough = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)
    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **passthrough,
    )


def init_logging(config: Config) -> None:
    """Initialize lib_log_rich from ``config`` unless it is already running.

    Loads ``.env`` files first so ``LOG_*`` variables can override the
    configured levels, then attaches the stdlib logging bridge.

    Example:
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


def shutdown_logging() -> None:
    """Shut the runtime down, but only from the main thread.

    Worker threads calling the CLI entry point must not tear down logging
    for the rest of the process.
    """
    if threading.current_thread() is not threading.main_thread():
        return
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
    "shutdown_logging",
]

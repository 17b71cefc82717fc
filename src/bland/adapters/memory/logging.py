"""In-memory logging adapters for testing.

Satisfy the InitLogging protocol without touching the lib_log_rich runtime.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from lib_layered_config import Config


def _empty_config_list() -> list[Config]:
    """Create an empty typed list for captured configs."""
    return []


@dataclass
class LoggingSpy:
    """Record every logging initialisation request.

    Example:
        >>> spy = LoggingSpy()
        >>> spy.init_logging(Config({}, {}))
        >>> len(spy.configs)
        1
    """

    configs: list[Config] = field(default_factory=_empty_config_list)

    def init_logging(self, config: Config) -> None:
        """Capture ``config`` instead of initialising lib_log_rich."""
        self.configs.append(config)


def init_logging_in_memory(config: Config) -> None:
    """No-op initializer for tests that do not inspect logging setup."""


__all__ = ["LoggingSpy", "init_logging_in_memory"]

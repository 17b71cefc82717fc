"""Parse and apply ``--set SECTION.KEY=VALUE`` overrides, and coerce CLI values.

Dotted keys are split and nested with the same path helpers the store uses
for its own data, so ``--set store.compression=true`` and
``bland set server.port 8080`` follow one set of rules.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

from bland.domain.behaviors import PATH_SEPARATOR, set_path, split_path
from bland.domain.errors import PathConflictError
from bland.domain.models import ConfigMapping, ConfigValue


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """A single parsed configuration override."""

    section: str
    key_path: tuple[str, ...]
    value: ConfigValue

    @property
    def dotted(self) -> str:
        return PATH_SEPARATOR.join((self.section, *self.key_path))


def coerce_value(raw: str) -> ConfigValue:
    """Interpret a CLI string as JSON, falling back to the literal string.

    Examples:
        >>> coerce_value("true"), coerce_value("42"), coerce_value("3.5")
        (True, 42, 3.5)
        >>> coerce_value("null") is None
        True
        >>> coerce_value('{"a": [1, 2]}')
        {'a': [1, 2]}
        >>> coerce_value("hello")
        'hello'
        >>> coerce_value("")
        ''
    """
    if raw == "":
        return ""
    try:
        return cast(ConfigValue, orjson.loads(raw))
    except orjson.JSONDecodeError:
        return raw


def parse_override(raw: str) -> ConfigOverride:
    """Split ``SECTION.KEY[.SUBKEY...]=VALUE`` into a ConfigOverride.

    The first ``=`` ends the path; the first dot ends the section.

    Raises:
        ValueError: No ``=``, no dot in the path, or an empty component.

    Examples:
        >>> o = parse_override("store.compression=true")
        >>> o.section, o.key_path, o.value
        ('store', ('compression',), True)
        >>> parse_override("lib_log_rich.payload_limits.max_chars=8192").key_path
        ('payload_limits', 'max_chars')
    """
    if "=" not in raw:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")
    path_part, value_str = raw.split("=", maxsplit=1)
    if PATH_SEPARATOR not in path_part:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")
    try:
        parts = split_path(path_part)
    except ValueError as exc:
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component") from exc
    return ConfigOverride(section=parts[0], key_path=parts[1:], value=coerce_value(value_str))


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Deep-merge ``--set`` overrides into a new Config.

    Returns the original object untouched when there is nothing to apply.

    Raises:
        ValueError: An override is malformed or nests below a scalar override.

    Examples:
        >>> cfg = Config({"store": {"crypto": False}}, {})
        >>> apply_overrides(cfg, ("store.crypto=true",))["store"]["crypto"]
        True
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config
    nested: ConfigMapping = {}
    for raw in raw_overrides:
        override = parse_override(raw)
        try:
            set_path(nested, override.dotted, override.value)
        except PathConflictError as exc:
            raise ValueError(f"Invalid override {raw!r}: {exc}") from exc
    return config.with_overrides(nested)


__all__ = [
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]

"""Value types shared by the store, its ports and its adapters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

ConfigValue = Union[str, int, float, bool, None, list["ConfigValue"], dict[str, "ConfigValue"]]
"""JSON-representable value held under a configuration key."""

ConfigMapping = dict[str, ConfigValue]
"""Top-level key/value mapping persisted as one blob."""


@dataclass(frozen=True, slots=True)
class Capabilities:
    """Transform capabilities enabled for a store instance.

    Attributes:
        compression: Compress the serialized payload.
        crypto: Encrypt the serialized payload. Takes priority over compression.

    Example:
        >>> Capabilities(compression=True)
        Capabilities(compression=True, crypto=False)
    """

    compression: bool = False
    crypto: bool = False


__all__ = [
    "Capabilities",
    "ConfigMapping",
    "ConfigValue",
]

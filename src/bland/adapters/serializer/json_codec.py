"""JSON serializer backed by orjson."""

from __future__ import annotations

import math
from typing import cast

import orjson

from bland.domain.errors import SerializationError
from bland.domain.models import ConfigMapping


def _reject_non_finite(value: object, where: str) -> None:
    if isinstance(value, float) and not math.isfinite(value):
        location = where or "<root>"
        raise SerializationError(f"Mapping is not JSON-serializable: non-finite float {value!r} at {location!r}")
    if isinstance(value, dict):
        for key, child in value.items():
            _reject_non_finite(child, f"{where}.{key}" if where else str(key))
    elif isinstance(value, (list, tuple)):
        for index, child in enumerate(value):
            _reject_non_finite(child, f"{where}[{index}]")


class JsonSerializer:
    """Encode the mapping as compact UTF-8 JSON and decode it back.

    Key order is preserved on both sides so round-trips are deterministic.

    Example:
        >>> codec = JsonSerializer()
        >>> codec.encode({"a": 1, "b": [True, None]})
        b'{"a":1,"b":[true,null]}'
        >>> codec.decode(b'{"a": 1}')
        {'a': 1}
    """

    def encode(self, mapping: ConfigMapping) -> bytes:
        """Serialize ``mapping``.

        Raises:
            SerializationError: A value is not JSON-representable, including
                ``nan`` and infinities, which orjson would write as ``null``.
        """
        _reject_non_finite(mapping, "")
        try:
            return orjson.dumps(mapping)
        except TypeError as exc:
            raise SerializationError(f"Mapping is not JSON-serializable: {exc}") from exc

    def decode(self, data: bytes) -> ConfigMapping:
        """Parse ``data`` into a mapping.

        Raises:
            SerializationError: ``data`` is not valid JSON or its root is not an object.
        """
        try:
            parsed: object = orjson.loads(data)
        except orjson.JSONDecodeError as exc:
            raise SerializationError(f"Stored payload is not valid JSON: {exc}") from exc
        if not isinstance(parsed, dict):
            raise SerializationError(f"Stored payload must be a JSON object, got {type(parsed).__name__}")
        return cast(ConfigMapping, parsed)

    def __repr__(self) -> str:
        return "JsonSerializer()"


__all__ = ["JsonSerializer"]

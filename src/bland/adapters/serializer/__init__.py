"""Serializer adapter - JSON encoding of the configuration mapping.

Contents:
    * :class:`.json_codec.JsonSerializer` - orjson-backed Serializer port
"""

from __future__ import annotations

from .json_codec import JsonSerializer

__all__ = ["JsonSerializer"]

"""Adapters layer - infrastructure and framework integrations.

Contains adapter implementations that connect the store to external
libraries and media.

Contents:
    * :mod:`.transform` - zlib and AES-GCM payload transforms
    * :mod:`.serializer` - orjson mapping serializer
    * :mod:`.storage` - file storage backend
    * :mod:`.memory` - in-memory adapters for tests
    * :mod:`.config` - Configuration loading, display, and store settings
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.cli` - rich-click CLI
"""

from __future__ import annotations

__all__: list[str] = []

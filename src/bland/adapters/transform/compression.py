"""zlib compression transform.

The zlib container carries an adler32 checksum, so corrupted payloads are
detected on decompression rather than surfacing as bad JSON later.
"""

from __future__ import annotations

import zlib

from bland.domain.enums import TransformKind
from bland.domain.errors import ConfigurationError, DecompressionError

#: zlib's own default trade-off between speed and ratio.
DEFAULT_COMPRESSION_LEVEL = -1


class ZlibTransform:
    """Compress on apply, decompress on reverse.

    Args:
        level: zlib compression level, ``-1`` (library default) or ``0`` to ``9``.

    Raises:
        ConfigurationError: If ``level`` is out of range.

    Example:
        >>> t = ZlibTransform(level=9)
        >>> t.reverse(t.apply(b"hello" * 100))[:10]
        b'hellohello'
        >>> t.reverse(t.apply(b""))
        b''
    """

    def __init__(self, level: int = DEFAULT_COMPRESSION_LEVEL) -> None:
        if not -1 <= level <= 9:
            raise ConfigurationError(f"Compression level must be between -1 and 9, got {level}")
        self._level = level

    @property
    def kind(self) -> TransformKind:
        return TransformKind.COMPRESS

    @property
    def level(self) -> int:
        return self._level

    def apply(self, data: bytes) -> bytes:
        return zlib.compress(data, self._level)

    def reverse(self, data: bytes) -> bytes:
        """Decompress a complete zlib stream.

        Raises:
            DecompressionError: Corrupt header, checksum mismatch, truncated
                stream, or bytes trailing the end of the stream.
        """
        decompressor = zlib.decompressobj()
        try:
            result = decompressor.decompress(data)
        except zlib.error as exc:
            raise DecompressionError(f"Corrupt compressed stream: {exc}") from exc
        if not decompressor.eof:
            raise DecompressionError("Compressed stream is truncated")
        if decompressor.unused_data:
            raise DecompressionError(f"{len(decompressor.unused_data)} unexpected bytes after compressed stream")
        return result

    def __repr__(self) -> str:
        return f"ZlibTransform(level={self._level})"


__all__ = ["DEFAULT_COMPRESSION_LEVEL", "ZlibTransform"]

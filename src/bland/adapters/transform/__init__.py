"""Transform adapters - identity, zlib compression, AES-GCM encryption.

Contents:
    * :mod:`.identity` - pass-through transform
    * :mod:`.compression` - zlib transform
    * :mod:`.encryption` - AES-256-GCM transform
    * :mod:`.keys` - key validation and conversion
    * :func:`build_transform` - construct the transform for a TransformKind
"""

from __future__ import annotations

from bland.domain.enums import TransformKind
from bland.domain.errors import ConfigurationError

from .compression import DEFAULT_COMPRESSION_LEVEL, ZlibTransform
from .encryption import AesGcmTransform
from .identity import IdentityTransform
from .keys import KEY_SIZE, decode_key, key_from_passphrase, validate_key

Transform = IdentityTransform | ZlibTransform | AesGcmTransform
"""Closed union of every transform the store can use."""


def build_transform(
    kind: TransformKind,
    *,
    key: bytes | None = None,
    compression_level: int = DEFAULT_COMPRESSION_LEVEL,
) -> Transform:
    """Construct the transform for ``kind``.

    Args:
        kind: Selected transform kind.
        key: Encryption key; required for ``ENCRYPT`` and ignored otherwise.
        compression_level: zlib level for ``COMPRESS``.

    Raises:
        ConfigurationError: ``ENCRYPT`` requested without a key.
        InvalidKeyLengthError: Key is not 32 bytes.

    Example:
        >>> build_transform(TransformKind.COMPRESS)
        ZlibTransform(level=-1)
    """
    if kind is TransformKind.NONE:
        return IdentityTransform()
    if kind is TransformKind.COMPRESS:
        return ZlibTransform(level=compression_level)
    if kind is TransformKind.ENCRYPT:
        if key is None:
            raise ConfigurationError("Crypto is enabled but no encryption key was supplied")
        return AesGcmTransform(key)
    raise AssertionError(f"Unhandled transform kind: {kind!r}")


__all__ = [
    "DEFAULT_COMPRESSION_LEVEL",
    "KEY_SIZE",
    "AesGcmTransform",
    "IdentityTransform",
    "Transform",
    "ZlibTransform",
    "build_transform",
    "decode_key",
    "key_from_passphrase",
    "validate_key",
]

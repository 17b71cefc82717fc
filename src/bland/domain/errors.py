"""Domain-specific exceptions for typed error handling at boundaries.

Every failure the store can report derives from :class:`StoreError` so
callers can catch the whole family at once while still distinguishing
"tampered or wrong key" from "not ciphertext at all".
"""

from __future__ import annotations


class StoreError(Exception):
    """Base class for every error raised by the configuration store."""


class ConfigurationError(StoreError):
    """Missing, invalid, or incomplete configuration.

    Raised when required construction inputs are absent or logically
    inconsistent, e.g. crypto enabled without a key.

    Example:
        >>> from bland.domain.errors import ConfigurationError
        >>> err = ConfigurationError("crypto enabled but no key supplied")
        >>> str(err)
        'crypto enabled but no key supplied'
    """


class InvalidKeyLengthError(ConfigurationError):
    """Encryption key does not have the required length.

    Example:
        >>> err = InvalidKeyLengthError("expected 32 bytes, got 7")
        >>> isinstance(err, ConfigurationError)
        True
    """


class BackendIOError(StoreError, OSError):
    """Backend read or write failure.

    Inherits from OSError so ``except OSError`` handlers around file work
    keep catching it. Never retried by the store.
    """


class TransformError(StoreError):
    """Base class for failures while reversing a stored payload."""


class DecompressionError(TransformError):
    """Compressed stream is truncated, corrupt, or fails its checksum."""


class AuthenticationError(TransformError):
    """Integrity tag did not verify: tampered data or wrong key.

    Example:
        >>> err = AuthenticationError("authentication tag mismatch")
        >>> isinstance(err, TransformError)
        True
    """


class MalformedCiphertextError(TransformError):
    """Byte sequence is too short to hold nonce, ciphertext and tag."""


class TransformMismatchError(TransformError):
    """Blob was written with a different transform than the reading store uses."""


class SerializationError(StoreError):
    """Decoded bytes are not a valid mapping encoding."""


class PathConflictError(StoreError, ValueError):
    """A dotted path traverses into a value that is not a mapping.

    Example:
        >>> err = PathConflictError("'a' is not a mapping")
        >>> isinstance(err, ValueError)
        True
    """


__all__ = [
    "AuthenticationError",
    "BackendIOError",
    "ConfigurationError",
    "DecompressionError",
    "InvalidKeyLengthError",
    "MalformedCiphertextError",
    "PathConflictError",
    "SerializationError",
    "StoreError",
    "TransformError",
    "TransformMismatchError",
]

"""Key material helpers for the encryption transform.

Keys are caller-owned. These helpers only validate or convert them; nothing
here reads keys from disk or writes them anywhere.
"""

from __future__ import annotations

import base64

from bland.domain.errors import InvalidKeyLengthError

KEY_SIZE = 32  # 256 bits


def validate_key(key: bytes) -> bytes:
    """Return ``key`` unchanged when it is exactly :data:`KEY_SIZE` bytes.

    Raises:
        InvalidKeyLengthError: Wrong length or not a bytes-like value.

    Example:
        >>> len(validate_key(bytes(32)))
        32
    """
    if not isinstance(key, (bytes, bytearray, memoryview)):
        raise InvalidKeyLengthError(f"Encryption key must be bytes, got {type(key).__name__}")
    key = bytes(key)
    if len(key) != KEY_SIZE:
        raise InvalidKeyLengthError(f"Encryption key must be {KEY_SIZE} bytes, got {len(key)}")
    return key


def key_from_passphrase(passphrase: str) -> bytes:
    """Zero-pad a short UTF-8 passphrase to a 32-byte key.

    This is a convenience for simple setups and provides no key stretching;
    prefer :func:`decode_key` with random key material.

    Raises:
        InvalidKeyLengthError: The encoded passphrase exceeds 32 bytes.

    Example:
        >>> key_from_passphrase("test_key")[:9]
        b'test_key\\x00'
        >>> len(key_from_passphrase("test_key"))
        32
    """
    raw = passphrase.encode("utf-8")
    if len(raw) > KEY_SIZE:
        raise InvalidKeyLengthError(f"Passphrase must be at most {KEY_SIZE} bytes, got {len(raw)}")
    return raw.ljust(KEY_SIZE, b"\x00")


def decode_key(text: str) -> bytes:
    """Decode a 32-byte key given as hex (64 chars) or base64 text.

    Raises:
        InvalidKeyLengthError: Text is neither encoding of a 32-byte key.

    Example:
        >>> decode_key("00" * 32) == bytes(32)
        True
        >>> decode_key("AAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA=") == bytes(32)
        True
    """
    cleaned = text.strip()
    if len(cleaned) == KEY_SIZE * 2:
        try:
            return validate_key(bytes.fromhex(cleaned))
        except ValueError:
            pass
    altchars = b"-_" if "-" in cleaned or "_" in cleaned else None
    try:
        decoded = base64.b64decode(cleaned, altchars=altchars, validate=True)
    except ValueError as exc:  # binascii.Error, or non-ASCII text
        raise InvalidKeyLengthError("Encryption key text is neither hex nor base64") from exc
    return validate_key(decoded)


__all__ = [
    "KEY_SIZE",
    "decode_key",
    "key_from_passphrase",
    "validate_key",
]

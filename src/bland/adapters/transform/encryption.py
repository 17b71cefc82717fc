"""AES-256-GCM authenticated encryption transform.

Wire format of ``apply``:

    [nonce (12 bytes)] [ciphertext] [auth tag (16 bytes)]

The format header byte of the stored blob is bound as associated data, so
changing it fails authentication like any other tampered byte.
"""

from __future__ import annotations

import secrets

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from bland.domain.enums import TransformKind
from bland.domain.errors import AuthenticationError, MalformedCiphertextError

from .keys import KEY_SIZE, validate_key

NONCE_SIZE = 12  # 96 bits (standard for GCM)
AUTH_TAG_SIZE = 16  # 128 bits (standard for GCM)
MIN_CIPHERTEXT_SIZE = NONCE_SIZE + AUTH_TAG_SIZE


class AesGcmTransform:
    """Encrypt on apply, verify and decrypt on reverse.

    The key lives only in this object; it is never written, logged, or
    shown by ``repr``.

    Args:
        key: Exactly 32 bytes of key material.

    Raises:
        InvalidKeyLengthError: If ``key`` is not 32 bytes long.

    Example:
        >>> t = AesGcmTransform(bytes(32))
        >>> blob = t.apply(b"secret")
        >>> len(blob) == len(b"secret") + MIN_CIPHERTEXT_SIZE
        True
        >>> t.reverse(blob)
        b'secret'
    """

    def __init__(self, key: bytes) -> None:
        self._cipher = AESGCM(validate_key(key))
        self._aad = bytes([TransformKind.ENCRYPT.format_tag])

    @property
    def kind(self) -> TransformKind:
        return TransformKind.ENCRYPT

    def apply(self, data: bytes) -> bytes:
        """Encrypt ``data`` under a fresh random nonce."""
        nonce = secrets.token_bytes(NONCE_SIZE)
        return nonce + self._cipher.encrypt(nonce, data, self._aad)

    def reverse(self, data: bytes) -> bytes:
        """Verify and decrypt ``data``.

        Raises:
            MalformedCiphertextError: ``data`` is shorter than nonce plus tag.
            AuthenticationError: The tag does not verify (tampering or wrong key).
        """
        if len(data) < MIN_CIPHERTEXT_SIZE:
            raise MalformedCiphertextError(
                f"Ciphertext must be at least {MIN_CIPHERTEXT_SIZE} bytes, got {len(data)}"
            )
        nonce, sealed = data[:NONCE_SIZE], data[NONCE_SIZE:]
        try:
            return self._cipher.decrypt(nonce, sealed, self._aad)
        except InvalidTag as exc:
            raise AuthenticationError("Authentication tag mismatch: data was tampered with or the key is wrong") from exc

    def __repr__(self) -> str:
        return f"AesGcmTransform(key=<{KEY_SIZE} bytes redacted>)"


__all__ = [
    "AUTH_TAG_SIZE",
    "AesGcmTransform",
    "MIN_CIPHERTEXT_SIZE",
    "NONCE_SIZE",
]

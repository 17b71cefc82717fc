"""Type-safe domain enums for transforms, store lifecycle and output formats."""

from __future__ import annotations

from enum import Enum


class TransformKind(str, Enum):
    """Payload transform applied between serialization and storage.

    Exactly one kind is active per store instance. Each kind owns a
    one-byte format tag written at the start of every stored blob.

    Attributes:
        NONE: Identity transform.
        COMPRESS: zlib compression.
        ENCRYPT: AES-256-GCM authenticated encryption.

    Example:
        >>> TransformKind.ENCRYPT.value
        'encrypt'
        >>> TransformKind.COMPRESS.format_tag
        1
        >>> TransformKind.from_format_tag(0)
        <TransformKind.NONE: 'none'>
    """

    NONE = "none"
    COMPRESS = "compress"
    ENCRYPT = "encrypt"

    @property
    def format_tag(self) -> int:
        """Return the frame header byte identifying this kind."""
        return _FORMAT_TAGS[self]

    @classmethod
    def from_format_tag(cls, tag: int) -> TransformKind | None:
        """Return the kind for a frame header byte, or None when unknown."""
        for kind, value in _FORMAT_TAGS.items():
            if value == tag:
                return kind
        return None


_FORMAT_TAGS: dict[TransformKind, int] = {
    TransformKind.NONE: 0x00,
    TransformKind.COMPRESS: 0x01,
    TransformKind.ENCRYPT: 0x02,
}


class StoreState(str, Enum):
    """Lifecycle states of a ConfigStore.

    ``UNINITIALIZED -> LOADED -> (MUTATED <-> SAVED)``; a fresh store may
    also go straight from ``UNINITIALIZED`` to ``MUTATED``.
    """

    UNINITIALIZED = "uninitialized"
    LOADED = "loaded"
    MUTATED = "mutated"
    SAVED = "saved"


class OutputFormat(str, Enum):
    """Output format options for configuration and store display.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "OutputFormat",
    "StoreState",
    "TransformKind",
]

"""Identity transform used when neither compression nor crypto is enabled."""

from __future__ import annotations

from bland.domain.enums import TransformKind


class IdentityTransform:
    """Pass bytes through unchanged in both directions.

    Example:
        >>> IdentityTransform().reverse(IdentityTransform().apply(b"abc"))
        b'abc'
    """

    @property
    def kind(self) -> TransformKind:
        return TransformKind.NONE

    def apply(self, data: bytes) -> bytes:
        return data

    def reverse(self, data: bytes) -> bytes:
        return data

    def __repr__(self) -> str:
        return "IdentityTransform()"


__all__ = ["IdentityTransform"]

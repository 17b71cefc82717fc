"""ConfigStore use case: in-memory mapping plus the load/save contract.

The store owns the mapping, one fixed transform and a serializer. Backends
are passed per call so a single store can be loaded from one medium and
saved to another.

Contents:
    * :class:`ConfigStore` - get/set/remove/load/save over one blob.
    * :func:`frame` / :func:`unframe` - one-byte format header handling.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterator

from ..domain.behaviors import get_path, has_path, remove_path, set_path
from ..domain.enums import StoreState, TransformKind
from ..domain.errors import AuthenticationError, TransformMismatchError
from ..domain.models import ConfigMapping, ConfigValue
from .ports import Serializer, StorageBackend, Transform

logger = logging.getLogger(__name__)


def frame(kind: TransformKind, payload: bytes) -> bytes:
    """Prepend the format header byte for ``kind``.

    Example:
        >>> frame(TransformKind.NONE, b"{}")
        b'\\x00{}'
    """
    return bytes([kind.format_tag]) + payload


def unframe(kind: TransformKind, blob: bytes) -> bytes:
    """Strip and check the format header of a stored blob.

    An encrypting store treats any foreign header as a failed integrity
    check, since the header is bound into the authentication tag.

    Raises:
        AuthenticationError: Header mismatch on an ``ENCRYPT`` store.
        TransformMismatchError: Header mismatch on any other store.

    Example:
        >>> unframe(TransformKind.NONE, b"\\x00{}")
        b'{}'
    """
    header = blob[0]
    if header == kind.format_tag:
        return blob[1:]
    if kind is TransformKind.ENCRYPT:
        raise AuthenticationError("Stored blob header does not authenticate as encrypted data")
    written = TransformKind.from_format_tag(header)
    if written is None:
        raise TransformMismatchError(f"Unknown format header 0x{header:02x}; blob was not written by this store")
    raise TransformMismatchError(
        f"Blob was written with transform {written.value!r} but store uses {kind.value!r}"
    )


class ConfigStore:
    """Persistent key-value configuration held in memory between load and save.

    The store is a single-owner value: it performs no locking and keeps no
    global state. Callers sharing one instance across threads must wrap
    ``load``/``save``/``set``/``remove`` in their own lock. Values are copied
    on the way in and out, so only the store's own methods change its contents.

    Args:
        transform: Fixed transform applied to every saved payload.
        serializer: Encoder/decoder for the mapping.

    Example:
        >>> from bland.adapters.serializer import JsonSerializer
        >>> from bland.adapters.transform import IdentityTransform
        >>> from bland.adapters.memory import InMemoryBackend
        >>> store = ConfigStore(IdentityTransform(), JsonSerializer())
        >>> store.set("x", 1)
        >>> backend = InMemoryBackend()
        >>> store.save(backend)
        >>> fresh = ConfigStore(IdentityTransform(), JsonSerializer())
        >>> fresh.load(backend)
        >>> fresh.get("x")
        1
    """

    def __init__(self, transform: Transform, serializer: Serializer) -> None:
        self._transform = transform
        self._serializer = serializer
        self._mapping: ConfigMapping = {}
        self._dirty = False
        self._state = StoreState.UNINITIALIZED

    def __repr__(self) -> str:
        return f"ConfigStore(kind={self.kind.value!r}, state={self._state.value!r}, keys={len(self._mapping)})"

    @property
    def kind(self) -> TransformKind:
        """Transform kind fixed at construction."""
        return self._transform.kind

    @property
    def dirty(self) -> bool:
        """True when the mapping holds changes not yet saved."""
        return self._dirty

    @property
    def state(self) -> StoreState:
        """Current lifecycle state."""
        return self._state

    def __contains__(self, key: object) -> bool:
        return key in self._mapping

    def __len__(self) -> int:
        return len(self._mapping)

    def __iter__(self) -> Iterator[str]:
        return iter(self._mapping)

    def keys(self) -> list[str]:
        """Return the top-level keys in insertion order."""
        return list(self._mapping)

    def as_dict(self) -> ConfigMapping:
        """Return a deep copy of the current mapping."""
        return copy.deepcopy(self._mapping)

    # ------------------------------------------------------------------ access

    def get(self, key: str, default: ConfigValue | None = None) -> ConfigValue | None:
        """Return a copy of the value stored under ``key`` or ``default``."""
        if key not in self._mapping:
            return default
        return copy.deepcopy(self._mapping[key])

    def set(self, key: str, value: ConfigValue) -> None:
        """Insert or overwrite ``key`` with a copy of ``value`` and mark the store dirty."""
        self._mapping[key] = copy.deepcopy(value)
        self._mark_mutated()

    def remove(self, key: str) -> bool:
        """Remove ``key`` if present.

        Returns:
            True when a value was removed. Only then is the store marked dirty.
        """
        if key not in self._mapping:
            return False
        del self._mapping[key]
        self._mark_mutated()
        return True

    def clear(self) -> None:
        """Reset to an empty mapping, marking dirty only when keys were dropped."""
        if not self._mapping:
            return
        self._mapping = {}
        self._mark_mutated()

    def get_path(self, path: str) -> ConfigValue | None:
        """Return a copy of the value at a dotted path such as ``"server.port"``."""
        return copy.deepcopy(get_path(self._mapping, path))

    def has_path(self, path: str) -> bool:
        """Return True when a value, possibly ``None``, is stored at ``path``."""
        return has_path(self._mapping, path)

    def set_path(self, path: str, value: ConfigValue) -> None:
        """Set a value at a dotted path, creating intermediate mappings.

        Raises:
            PathConflictError: An intermediate component is not a mapping.
        """
        set_path(self._mapping, path, copy.deepcopy(value))
        self._mark_mutated()

    def remove_path(self, path: str) -> bool:
        """Remove the value at a dotted path; dirty only when removed."""
        removed = remove_path(self._mapping, path)
        if removed:
            self._mark_mutated()
        return removed

    def _mark_mutated(self) -> None:
        self._dirty = True
        self._state = StoreState.MUTATED

    # ------------------------------------------------------------- persistence

    def load(self, backend: StorageBackend) -> None:
        """Replace the mapping with the blob held by ``backend``.

        An empty backend yields an empty mapping. On any failure the store
        keeps its previous mapping, dirty flag and state.

        Raises:
            BackendIOError: The backend could not be read.
            TransformError: The payload could not be reversed.
            SerializationError: The payload is not a valid mapping encoding.
        """
        blob = backend.read_all()
        if not blob:
            mapping: ConfigMapping = {}
        else:
            payload = self._transform.reverse(unframe(self.kind, blob))
            mapping = self._serializer.decode(payload)
        self._mapping = mapping
        self._dirty = False
        self._state = StoreState.LOADED
        logger.debug(
            "Loaded configuration store",
            extra={"kind": self.kind.value, "bytes": len(blob), "keys": len(mapping), "backend": repr(backend)},
        )

    def save(self, backend: StorageBackend) -> None:
        """Encode, transform and write the mapping to ``backend``.

        The dirty flag is cleared only after the backend accepted every byte.

        Raises:
            SerializationError: The mapping holds a value the serializer cannot
                represent, such as an integer beyond 64 bits or ``nan``/``inf``.
            TransformError: The transform failed on the encoded payload.
            BackendIOError: The backend rejected the write.
        """
        payload = self._transform.apply(self._serializer.encode(self._mapping))
        blob = frame(self.kind, payload)
        backend.write_all(blob)
        self._dirty = False
        self._state = StoreState.SAVED
        logger.debug(
            "Saved configuration store",
            extra={"kind": self.kind.value, "bytes": len(blob), "keys": len(self._mapping), "backend": repr(backend)},
        )


__all__ = [
    "ConfigStore",
    "frame",
    "unframe",
]

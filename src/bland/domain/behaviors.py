"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import cast

from .enums import TransformKind
from .errors import PathConflictError
from .models import Capabilities, ConfigMapping, ConfigValue

PATH_SEPARATOR = "."


def select_transform_kind(capabilities: Capabilities) -> TransformKind:
    """Resolve the single active transform for a capability set.

    Crypto wins over compression: ciphertext does not compress, so the two
    are never stacked.

    Args:
        capabilities: Enabled compression/crypto flags.

    Returns:
        The transform kind the store must use for every load and save.

    Example:
        >>> select_transform_kind(Capabilities(compression=True, crypto=True))
        <TransformKind.ENCRYPT: 'encrypt'>
        >>> select_transform_kind(Capabilities(compression=True))
        <TransformKind.COMPRESS: 'compress'>
        >>> select_transform_kind(Capabilities())
        <TransformKind.NONE: 'none'>
    """
    if capabilities.crypto:
        return TransformKind.ENCRYPT
    if capabilities.compression:
        return TransformKind.COMPRESS
    return TransformKind.NONE


def split_path(path: str) -> tuple[str, ...]:
    """Split a dotted path into its components.

    Raises:
        ValueError: If the path is empty or has an empty component.

    Example:
        >>> split_path("server.http.port")
        ('server', 'http', 'port')
        >>> split_path("a..b")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: Invalid path 'a..b': empty component
    """
    parts = tuple(path.split(PATH_SEPARATOR))
    if not all(parts):
        raise ValueError(f"Invalid path {path!r}: empty component")
    return parts


def _descend(mapping: ConfigMapping, parts: tuple[str, ...], *, create: bool) -> ConfigMapping | None:
    """Walk to the mapping holding the last path component."""
    node: ConfigMapping = mapping
    walked: list[str] = []
    for part in parts[:-1]:
        walked.append(part)
        child = node.get(part)
        if child is None and part not in node:
            if not create:
                return None
            child = {}
            node[part] = child
        if not isinstance(child, MutableMapping):
            dotted = PATH_SEPARATOR.join(walked)
            raise PathConflictError(f"Unexpected value at {dotted!r} while traversing path: not a mapping")
        node = cast(ConfigMapping, child)
    return node


def get_path(mapping: ConfigMapping, path: str) -> ConfigValue | None:
    """Return the value at a dotted path, or None when any component is absent.

    Example:
        >>> get_path({"a": {"b": 42}}, "a.b")
        42
        >>> get_path({"a": 1}, "a.b") is None
        True
    """
    node: ConfigValue = mapping
    for part in split_path(path):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node


def has_path(mapping: ConfigMapping, path: str) -> bool:
    """Return True when every component of the dotted path exists.

    Unlike :func:`get_path`, an explicit ``None`` value counts as present.

    Example:
        >>> has_path({"a": {"b": None}}, "a.b")
        True
        >>> has_path({"a": {}}, "a.b")
        False
    """
    node: ConfigValue = mapping
    for part in split_path(path):
        if not isinstance(node, dict) or part not in node:
            return False
        node = node[part]
    return True


def set_path(mapping: ConfigMapping, path: str, value: ConfigValue) -> None:
    """Set a value at a dotted path, creating intermediate mappings.

    Raises:
        PathConflictError: If an intermediate component holds a non-mapping.

    Example:
        >>> data: ConfigMapping = {}
        >>> set_path(data, "a.b", 42)
        >>> data
        {'a': {'b': 42}}
    """
    parts = split_path(path)
    parent = cast(ConfigMapping, _descend(mapping, parts, create=True))
    parent[parts[-1]] = value


def remove_path(mapping: ConfigMapping, path: str) -> bool:
    """Remove the value at a dotted path and report whether anything was removed.

    Raises:
        PathConflictError: If an intermediate component holds a non-mapping.

    Example:
        >>> data: ConfigMapping = {"a": {"b": 1, "c": 2}}
        >>> remove_path(data, "a.b")
        True
        >>> remove_path(data, "a.x")
        False
        >>> data
        {'a': {'c': 2}}
    """
    parts = split_path(path)
    parent = _descend(mapping, parts, create=False)
    if parent is None or parts[-1] not in parent:
        return False
    del parent[parts[-1]]
    return True


__all__ = [
    "PATH_SEPARATOR",
    "get_path",
    "has_path",
    "remove_path",
    "select_transform_kind",
    "set_path",
    "split_path",
]

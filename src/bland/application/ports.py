"""Application ports - Protocol definitions for adapters.

Storage backends, serializers and transforms are structural protocols so
any object with the right methods plugs in. Function-shaped ports define
a ``__call__`` whose signature matches the corresponding adapter function,
and module-level functions satisfy them via structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``,
    ``StoreSettings``) are imported under ``TYPE_CHECKING`` only so that
    import-linter layer contracts remain satisfied at runtime.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from ..domain.enums import OutputFormat, TransformKind
from ..domain.models import ConfigMapping

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.config.settings import StoreSettings
    from .store import ConfigStore


class StorageBackend(Protocol):
    """Byte-level persistence for exactly one blob.

    ``read_all`` returns ``b""`` when nothing was ever written. Both methods
    raise :class:`~bland.domain.errors.BackendIOError` on failure.
    """

    def read_all(self) -> bytes: ...

    def write_all(self, data: bytes) -> None: ...


class ManagedBackend(StorageBackend, Protocol):
    """Storage backend that can also report and remove its blob."""

    def exists(self) -> bool: ...

    def delete(self) -> bool: ...


class Serializer(Protocol):
    """Deterministic encode/decode pair for the configuration mapping."""

    def encode(self, mapping: ConfigMapping) -> bytes: ...

    def decode(self, data: bytes) -> ConfigMapping: ...


class Transform(Protocol):
    """Reversible byte transform applied between serializer and backend."""

    @property
    def kind(self) -> TransformKind: ...

    def apply(self, data: bytes) -> bytes: ...

    def reverse(self, data: bytes) -> bytes: ...


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class GetDefaultConfigPath(Protocol):
    """Return the path to the bundled default configuration file."""

    def __call__(self) -> Path: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class LoadStoreSettings(Protocol):
    """Parse and validate the ``[store]`` section of a Config."""

    def __call__(self, config: Config) -> StoreSettings: ...


class OpenBackend(Protocol):
    """Open the storage backend described by validated store settings."""

    def __call__(self, settings: StoreSettings) -> ManagedBackend: ...


class CreateStore(Protocol):
    """Build an empty ConfigStore from validated store settings."""

    def __call__(self, settings: StoreSettings, *, environ: Mapping[str, str] | None = ...) -> ConfigStore: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "CreateStore",
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadStoreSettings",
    "ManagedBackend",
    "OpenBackend",
    "Serializer",
    "StorageBackend",
    "Transform",
]

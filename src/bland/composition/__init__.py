"""Composition root wiring adapters to application ports.

Also hosts the store factories: they pick the transform via the domain
selector and hand concrete adapters to :class:`ConfigStore`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config

# Configuration services
from ..adapters.config.loader import get_config, get_default_config_path
from ..adapters.config.settings import StoreSettings, load_store_settings

# Logging services
from ..adapters.logging.setup import init_logging

# Store services
from ..adapters.serializer import JsonSerializer
from ..adapters.storage import open_file_backend
from ..adapters.transform import DEFAULT_COMPRESSION_LEVEL, build_transform
from ..application.store import ConfigStore
from ..domain.behaviors import select_transform_kind
from ..domain.models import Capabilities

# Static conformance assertions - pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory import InMemoryBackend, LoggingSpy
    from ..application.ports import (
        CreateStore,
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        LoadStoreSettings,
        OpenBackend,
        Serializer,
    )

    _assert_get_config: GetConfig = get_config
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path
    _assert_display_config: DisplayConfig = display_config
    _assert_load_store_settings: LoadStoreSettings = load_store_settings
    _assert_open_backend: OpenBackend = open_file_backend
    _assert_init_logging: InitLogging = init_logging
    _assert_create_store: CreateStore = create_store_from_settings


def create_store(
    capabilities: Capabilities,
    key: bytes | None = None,
    *,
    compression_level: int = DEFAULT_COMPRESSION_LEVEL,
    serializer: Serializer | None = None,
) -> ConfigStore:
    """Build an empty store whose transform is fixed by ``capabilities``.

    Args:
        capabilities: Enabled compression/crypto flags. Crypto wins when both are set.
        key: 32-byte key, required when crypto is enabled. Held in memory only.
        compression_level: zlib level used when compression is selected.
        serializer: Mapping codec; defaults to :class:`JsonSerializer`.

    Raises:
        ConfigurationError: Crypto enabled without a key.
        InvalidKeyLengthError: Key is not 32 bytes.

    Example:
        >>> store = create_store(Capabilities(compression=True, crypto=True), bytes(32))
        >>> store.kind
        <TransformKind.ENCRYPT: 'encrypt'>
    """
    kind = select_transform_kind(capabilities)
    transform = build_transform(kind, key=key, compression_level=compression_level)
    return ConfigStore(transform, serializer if serializer is not None else JsonSerializer())


def create_store_from_settings(settings: StoreSettings, *, environ: Mapping[str, str] | None = None) -> ConfigStore:
    """Build an empty store from validated settings, reading the key from the environment."""
    return create_store(
        settings.capabilities(),
        settings.resolve_key(environ),
        compression_level=settings.compression_level,
    )


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    display_config: DisplayConfig
    load_store_settings: LoadStoreSettings
    open_backend: OpenBackend
    create_store: CreateStore
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        display_config=display_config,
        load_store_settings=load_store_settings,
        open_backend=open_file_backend,
        create_store=create_store_from_settings,
        init_logging=init_logging,
    )


def build_testing(
    *,
    backend: InMemoryBackend | None = None,
    logging_spy: LoggingSpy | None = None,
) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        backend: InMemoryBackend returned for every ``open_backend`` call.
            Pass your own to inspect the stored blob; a fresh one is
            created when None.
        logging_spy: Optional LoggingSpy capturing logging initialisation.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        InMemoryBackend,
        display_config_in_memory,
        get_config_in_memory,
        get_default_config_path_in_memory,
        init_logging_in_memory,
    )

    shared_backend = backend if backend is not None else InMemoryBackend()

    def _open_in_memory(settings: StoreSettings) -> InMemoryBackend:
        return shared_backend

    return AppServices(
        get_config=get_config_in_memory,
        get_default_config_path=get_default_config_path_in_memory,
        display_config=display_config_in_memory,
        load_store_settings=load_store_settings,
        open_backend=_open_in_memory,
        create_store=create_store_from_settings,
        init_logging=logging_spy.init_logging if logging_spy is not None else init_logging_in_memory,
    )


__all__ = [
    # Configuration
    "get_config",
    "get_default_config_path",
    "display_config",
    "load_store_settings",
    # Logging
    "init_logging",
    # Store
    "create_store",
    "create_store_from_settings",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]

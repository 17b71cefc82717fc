"""Application layer - use cases and port definitions.

Contains the ConfigStore use case and the port protocols that adapter
implementations satisfy.

Contents:
    * :mod:`.ports` - Protocol definitions for backends, serializers, transforms
    * :mod:`.store` - ConfigStore and blob framing
"""

from __future__ import annotations

from .ports import (
    CreateStore,
    DisplayConfig,
    GetConfig,
    GetDefaultConfigPath,
    InitLogging,
    LoadStoreSettings,
    ManagedBackend,
    OpenBackend,
    Serializer,
    StorageBackend,
    Transform,
)
from .store import ConfigStore, frame, unframe

__all__ = [
    "ConfigStore",
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
    "frame",
    "unframe",
]

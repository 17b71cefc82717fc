"""Public package surface exposing the configuration store and metadata.

This module provides the stable public API for the package, routing imports
through the proper architectural layers:
- Domain exports: Capabilities, transform kinds and the error hierarchy
- Application exports: ConfigStore
- Adapter exports: storage backends, serializer and key helpers
- Composition exports: store factories and layered configuration
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Adapter exports
from .adapters.memory import InMemoryBackend
from .adapters.serializer import JsonSerializer
from .adapters.storage import FileBackend, default_store_path
from .adapters.transform import KEY_SIZE, decode_key, key_from_passphrase

# Application exports
from .application.store import ConfigStore

# Composition exports (wired adapters)
from .composition import create_store, create_store_from_settings, get_config

# Domain exports
from .domain.enums import StoreState, TransformKind
from .domain.errors import (
    AuthenticationError,
    BackendIOError,
    ConfigurationError,
    DecompressionError,
    InvalidKeyLengthError,
    MalformedCiphertextError,
    PathConflictError,
    SerializationError,
    StoreError,
    TransformError,
    TransformMismatchError,
)
from .domain.models import Capabilities

__all__ = [
    "KEY_SIZE",
    "AuthenticationError",
    "BackendIOError",
    "Capabilities",
    "ConfigStore",
    "ConfigurationError",
    "DecompressionError",
    "FileBackend",
    "InMemoryBackend",
    "InvalidKeyLengthError",
    "JsonSerializer",
    "MalformedCiphertextError",
    "PathConflictError",
    "SerializationError",
    "StoreError",
    "StoreState",
    "TransformError",
    "TransformKind",
    "TransformMismatchError",
    "create_store",
    "create_store_from_settings",
    "decode_key",
    "default_store_path",
    "get_config",
    "key_from_passphrase",
    "print_info",
]

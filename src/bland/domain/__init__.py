"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Transform selection and dotted-path helpers
    * :mod:`.enums` - Domain enumerations (TransformKind, StoreState, OutputFormat)
    * :mod:`.errors` - Domain exception types
    * :mod:`.models` - Value types (Capabilities, ConfigValue, ConfigMapping)
"""

from __future__ import annotations

from .behaviors import get_path, has_path, remove_path, select_transform_kind, set_path, split_path
from .enums import OutputFormat, StoreState, TransformKind
from .errors import (
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
from .models import Capabilities, ConfigMapping, ConfigValue

__all__ = [
    # Behaviors
    "get_path",
    "has_path",
    "remove_path",
    "select_transform_kind",
    "set_path",
    "split_path",
    # Enums
    "OutputFormat",
    "StoreState",
    "TransformKind",
    # Models
    "Capabilities",
    "ConfigMapping",
    "ConfigValue",
    # Errors
    "AuthenticationError",
    "BackendIOError",
    "ConfigurationError",
    "DecompressionError",
    "InvalidKeyLengthError",
    "MalformedCiphertextError",
    "PathConflictError",
    "SerializationError",
    "StoreError",
    "TransformError",
    "TransformMismatchError",
]

"""Configuration adapter - loading, display, overrides and store settings.

Provides adapters for configuration management using lib_layered_config.

Contents:
    * :mod:`.loader` - Layered configuration loading with caching
    * :mod:`.display` - Configuration and store content display
    * :mod:`.overrides` - CLI ``--set`` override parsing and value coercion
    * :mod:`.settings` - StoreSettings model for the ``[store]`` section
"""

from __future__ import annotations

from .display import display_config, display_mapping
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides, coerce_value
from .settings import StoreSettings, load_store_settings

__all__ = [
    "StoreSettings",
    "apply_overrides",
    "coerce_value",
    "display_config",
    "display_mapping",
    "get_config",
    "get_default_config_path",
    "load_store_settings",
]

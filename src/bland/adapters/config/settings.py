"""Store settings model and loader.

Provides the StoreSettings Pydantic model for validated, immutable store
construction settings and the loader that extracts it from the layered
``[store]`` configuration section.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from bland.adapters.transform import DEFAULT_COMPRESSION_LEVEL, decode_key
from bland.domain.errors import ConfigurationError
from bland.domain.models import Capabilities

#: Environment variable consulted for the encryption key by default.
DEFAULT_KEY_ENV = "BLAND_STORE_KEY"


class StoreSettings(BaseModel):
    """Validated, immutable store settings.

    The encryption key itself is never part of the settings; only the name
    of the environment variable that carries it.

    Example:
        >>> settings = StoreSettings(compression=True, crypto=True)
        >>> settings.capabilities()
        Capabilities(compression=True, crypto=True)
        >>> settings.path is None
        True
    """

    model_config = ConfigDict(frozen=True)

    path: Path | None = None
    compression: bool = False
    compression_level: int = Field(default=DEFAULT_COMPRESSION_LEVEL, ge=-1, le=9)
    crypto: bool = False
    key_env: str = DEFAULT_KEY_ENV

    @field_validator("path", mode="before")
    @classmethod
    def _coerce_empty_path_to_none(cls, v: Any) -> Any:
        """Treat an empty or whitespace-only path as "use the default location".

        Examples:
            >>> StoreSettings._coerce_empty_path_to_none("  ")
            >>> StoreSettings._coerce_empty_path_to_none("/tmp/x.bin")
            '/tmp/x.bin'
        """
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("key_env")
    @classmethod
    def _require_key_env_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("key_env must name an environment variable")
        return v.strip()

    def capabilities(self) -> Capabilities:
        """Return the enabled transform capabilities."""
        return Capabilities(compression=self.compression, crypto=self.crypto)

    def resolve_key(self, environ: Mapping[str, str] | None = None) -> bytes | None:
        """Read the encryption key from the configured environment variable.

        Args:
            environ: Environment mapping; defaults to ``os.environ``.

        Returns:
            The decoded 32-byte key, or None when crypto is disabled.

        Raises:
            ConfigurationError: Crypto is enabled but the variable is unset.
            InvalidKeyLengthError: The variable does not hold a 32-byte key.

        Example:
            >>> StoreSettings(crypto=True).resolve_key({"BLAND_STORE_KEY": "00" * 32}) == bytes(32)
            True
            >>> StoreSettings().resolve_key({}) is None
            True
        """
        if not self.crypto:
            return None
        env = os.environ if environ is None else environ
        raw = env.get(self.key_env, "")
        if not raw.strip():
            raise ConfigurationError(f"Crypto is enabled but environment variable {self.key_env} is not set")
        return decode_key(raw)


def load_store_settings(config: Config) -> StoreSettings:
    """Load StoreSettings from the ``[store]`` section of a Config.

    Args:
        config: Already-loaded layered configuration.

    Returns:
        Validated settings; missing keys use model defaults.

    Raises:
        ConfigurationError: The section holds invalid values.

    Example:
        >>> settings = load_store_settings(Config({"store": {"compression": True}}, {}))
        >>> settings.capabilities()
        Capabilities(compression=True, crypto=False)
    """
    section: object = config.get("store", default={})
    raw = dict(cast(Mapping[str, Any], section)) if isinstance(section, Mapping) else section
    try:
        return StoreSettings.model_validate(raw if raw else {})
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [store] configuration: {exc}") from exc


__all__ = [
    "DEFAULT_KEY_ENV",
    "StoreSettings",
    "load_store_settings",
]

"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Info command from :mod:`.info`
    * Config command from :mod:`.config`
    * Store commands from :mod:`.store_cmd`
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_info
from .store_cmd import cli_clear, cli_get, cli_kind, cli_purge, cli_remove, cli_set, cli_show

__all__ = [
    "cli_clear",
    "cli_config",
    "cli_get",
    "cli_info",
    "cli_kind",
    "cli_purge",
    "cli_remove",
    "cli_set",
    "cli_show",
]

"""Display layered configuration and store contents.

Configuration display delegates to lib_layered_config's Rich-styled
renderer. Store contents are rendered with Rich (human) or orjson (JSON).
Both flush pending log output first so log lines do not interleave with
the rendered data.
"""

from __future__ import annotations

import lib_log_rich.runtime
import orjson
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as _lib_display
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from bland.domain.enums import OutputFormat
from bland.domain.models import ConfigMapping, ConfigValue


def _flush_logs() -> None:
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Display configuration using lib_layered_config's Rich display.

    Args:
        config: Already-loaded layered configuration object to display.
        output_format: HUMAN for TOML-like display, JSON for machine output.
        section: Optional section name (e.g. ``"store"``) to display alone.
        console: Optional Rich Console, mainly for tests.
        profile: Optional profile name to include in provenance comments.

    Raises:
        ValueError: If a section was requested that doesn't exist.
    """
    _flush_logs()
    lib_format = LibOutputFormat(output_format.value)
    _lib_display(config, output_format=lib_format, section=section, profile=profile, console=console)


def _add_branch(tree: Tree, key: str, value: ConfigValue) -> None:
    if isinstance(value, dict):
        branch = tree.add(f"[bold]{escape(key)}[/bold]")
        for child_key, child_value in value.items():
            _add_branch(branch, child_key, child_value)
        return
    tree.add(f"[bold]{escape(key)}[/bold] = {escape(orjson.dumps(value).decode())}")


def render_mapping_json(mapping: ConfigMapping) -> str:
    """Return ``mapping`` as indented JSON text.

    Example:
        >>> print(render_mapping_json({"x": 1}))
        {
          "x": 1
        }
    """
    return orjson.dumps(mapping, option=orjson.OPT_INDENT_2).decode()


def display_mapping(
    mapping: ConfigMapping,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    title: str = "store",
    console: Console | None = None,
) -> None:
    """Render store contents as a Rich tree or as JSON.

    JSON output bypasses Rich markup so it stays machine-parseable.
    """
    _flush_logs()
    out = console if console is not None else Console()
    if output_format is OutputFormat.JSON:
        out.print(render_mapping_json(mapping), markup=False, highlight=False, soft_wrap=True)
        return
    tree = Tree(f"[bold cyan]{title}[/bold cyan]")
    if not mapping:
        tree.add("[dim](empty)[/dim]")
    for key, value in mapping.items():
        _add_branch(tree, key, value)
    out.print(tree)


__all__ = ["display_config", "display_mapping", "render_mapping_json"]

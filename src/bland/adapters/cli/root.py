"""Root CLI command group and global option handling.

Defines the top-level Click group. Handles global flags ``--traceback``,
``--profile``, ``--set`` and ``--store``.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from bland import __init__conf__
from bland.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from bland.composition import AppServices


def _apply_cli_overrides(config: Config, set_overrides: tuple[str, ...]) -> Config:
    """Apply ``--set`` overrides, turning malformed input into a UsageError."""
    try:
        return apply_overrides(config, set_overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Load configuration from a named profile (e.g., 'production', 'test')",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    default=(),
    metavar="SECTION.KEY=VALUE",
    help="Override a configuration setting (repeatable), e.g. store.compression=true.",
)
@click.option(
    "--store",
    "store_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Store file to operate on (overrides store.path).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    traceback: bool,
    profile: str | None,
    set_overrides: tuple[str, ...],
    store_path: Path | None,
) -> None:
    """Load configuration once, start logging, and share state with subcommands.

    Example:
        >>> from click.testing import CliRunner
        >>> from bland.composition import build_testing
        >>> result = CliRunner().invoke(cli, ["kind"], obj=build_testing)
        >>> result.output.strip()
        'none'
    """
    # ctx.obj is always the services factory (production or test)
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    config = _apply_cli_overrides(services.get_config(profile=profile), set_overrides)
    services.init_logging(config)
    store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        store_path=store_path,
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Commands import from package ancestors, so registration is deferred until
# ``cli`` exists.
def _register_commands() -> None:
    from .commands import (
        cli_clear,
        cli_config,
        cli_get,
        cli_info,
        cli_kind,
        cli_purge,
        cli_remove,
        cli_set,
        cli_show,
    )

    for cmd in (
        cli_info,
        cli_config,
        cli_kind,
        cli_get,
        cli_set,
        cli_remove,
        cli_show,
        cli_clear,
        cli_purge,
    ):
        cli.add_command(cmd)


_register_commands()


__all__ = ["cli"]

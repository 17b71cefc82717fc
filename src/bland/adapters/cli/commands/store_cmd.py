"""Store inspection and editing commands.

Every command resolves ``[store]`` settings from the layered configuration
(``--store`` overrides the path), builds a store through the services
container, and loads it before acting. Store failures are reported on
stderr and mapped to an exit code via :func:`exit_code_for`.

Contents:
    * :func:`cli_kind` - Print the transform selected by the settings.
    * :func:`cli_get` - Print the value at a dotted path.
    * :func:`cli_set` - Write a value at a dotted path.
    * :func:`cli_remove` - Remove a dotted path.
    * :func:`cli_show` - Render the whole store.
    * :func:`cli_clear` - Empty the store.
    * :func:`cli_purge` - Delete the backing file.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import lib_log_rich.runtime
import orjson
import rich_click as click

from bland.adapters.config.display import display_mapping
from bland.adapters.config.overrides import coerce_value
from bland.adapters.config.settings import StoreSettings
from bland.application.ports import ManagedBackend
from bland.application.store import ConfigStore
from bland.domain.behaviors import select_transform_kind
from bland.domain.enums import OutputFormat
from bland.domain.errors import StoreError
from bland.domain.models import ConfigValue

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode, exit_code_for

logger = logging.getLogger(__name__)


@contextmanager
def _store_command(command: str, **extra: object) -> Iterator[None]:
    """Bind a logging scope for ``command`` and report store failures."""
    with lib_log_rich.runtime.bind(job_id=f"cli-{command}", extra={"command": command, **extra}):
        try:
            yield
        except StoreError as exc:
            code = exit_code_for(exc)
            logger.error(
                "Store command failed",
                extra={"command": command, "error_type": type(exc).__name__, "exit_code": int(code)},
            )
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(code) from exc
        except ValueError as exc:
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


def _resolve_settings(cli_ctx: CLIContext) -> StoreSettings:
    settings = cli_ctx.services.load_store_settings(cli_ctx.config)
    if cli_ctx.store_path is not None:
        settings = settings.model_copy(update={"path": cli_ctx.store_path})
    return settings


def _open_store(cli_ctx: CLIContext) -> tuple[ConfigStore, ManagedBackend]:
    """Build the configured store and load it from its backend."""
    settings = _resolve_settings(cli_ctx)
    store = cli_ctx.services.create_store(settings)
    backend = cli_ctx.services.open_backend(settings)
    store.load(backend)
    return store, backend


def _render_value(value: ConfigValue) -> str:
    """Strings print bare; everything else prints as JSON."""
    if isinstance(value, str):
        return value
    return orjson.dumps(value).decode()


@click.command("kind", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_kind(ctx: click.Context) -> None:
    """Print the transform (none, compress or encrypt) the settings select."""
    cli_ctx = get_cli_context(ctx)
    with _store_command("kind"):
        settings = _resolve_settings(cli_ctx)
        click.echo(select_transform_kind(settings.capabilities()).value)


@click.command("get", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("path")
@click.pass_context
def cli_get(ctx: click.Context, path: str) -> None:
    """Print the value stored at PATH (dotted, e.g. server.port).

    Exits with code 3 when nothing is stored at PATH.
    """
    cli_ctx = get_cli_context(ctx)
    with _store_command("get", path=path):
        store, _ = _open_store(cli_ctx)
        if not store.has_path(path):
            click.echo(f"Error: no value at {path!r}", err=True)
            raise SystemExit(ExitCode.NOT_FOUND)
        click.echo(_render_value(store.get_path(path)))


@click.command("set", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("path")
@click.argument("value")
@click.option(
    "--string",
    "as_string",
    is_flag=True,
    default=False,
    help="Store VALUE verbatim instead of parsing it as JSON",
)
@click.pass_context
def cli_set(ctx: click.Context, path: str, value: str, as_string: bool) -> None:
    """Store VALUE at PATH and save.

    VALUE is parsed as JSON when possible (``8080``, ``true``,
    ``[1, 2]``) and stored as a string otherwise.
    """
    cli_ctx = get_cli_context(ctx)
    with _store_command("set", path=path):
        store, backend = _open_store(cli_ctx)
        store.set_path(path, value if as_string else coerce_value(value))
        store.save(backend)
        logger.info("Stored value", extra={"path": path, "kind": store.kind.value})


@click.command("remove", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("path")
@click.pass_context
def cli_remove(ctx: click.Context, path: str) -> None:
    """Remove the value at PATH and save.

    Exits with code 3 when nothing is stored at PATH.
    """
    cli_ctx = get_cli_context(ctx)
    with _store_command("remove", path=path):
        store, backend = _open_store(cli_ctx)
        if not store.remove_path(path):
            click.echo(f"Error: no value at {path!r}", err=True)
            raise SystemExit(ExitCode.NOT_FOUND)
        store.save(backend)
        logger.info("Removed value", extra={"path": path})


@click.command("show", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (human-readable tree or JSON)",
)
@click.pass_context
def cli_show(ctx: click.Context, output_format: str) -> None:
    """Render every key in the store."""
    cli_ctx = get_cli_context(ctx)
    fmt = OutputFormat(output_format.lower())
    with _store_command("show", format=fmt.value):
        store, _ = _open_store(cli_ctx)
        display_mapping(store.as_dict(), output_format=fmt, title=f"store ({store.kind.value})")


@click.command("clear", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_clear(ctx: click.Context) -> None:
    """Remove every key and save an empty store."""
    cli_ctx = get_cli_context(ctx)
    with _store_command("clear"):
        store, backend = _open_store(cli_ctx)
        dropped = len(store)
        store.clear()
        store.save(backend)
        logger.info("Cleared store", extra={"keys": dropped})
        click.echo(f"Cleared {dropped} key(s)")


@click.command("purge", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--yes", is_flag=True, default=False, help="Do not ask for confirmation")
@click.pass_context
def cli_purge(ctx: click.Context, yes: bool) -> None:
    """Delete the store's backing file entirely."""
    cli_ctx = get_cli_context(ctx)
    with _store_command("purge"):
        settings = _resolve_settings(cli_ctx)
        backend = cli_ctx.services.open_backend(settings)
        if not backend.exists():
            click.echo("Nothing to purge")
            return
        if not yes:
            click.confirm(f"Delete {backend!r}?", abort=True)
        backend.delete()
        logger.warning("Purged store", extra={"backend": repr(backend)})
        click.echo("Store deleted")


__all__ = [
    "cli_clear",
    "cli_get",
    "cli_kind",
    "cli_purge",
    "cli_remove",
    "cli_set",
    "cli_show",
]

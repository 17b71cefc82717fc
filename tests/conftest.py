"""Shared pytest fixtures for store, CLI and module-entry tests.

Centralizes test infrastructure following clean architecture principles:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

from bland.adapters.memory import InMemoryBackend, LoggingSpy

if TYPE_CHECKING:
    from bland.composition import AppServices


def _load_dotenv() -> None:
    """Load .env file when it exists for local test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))

#: Hex encoding of a fixed 32-byte test key.
TEST_KEY_HEX = "0123456789abcdef" * 4
TEST_KEY = bytes.fromhex(TEST_KEY_HEX)


@pytest.fixture(autouse=True)
def quiet_logging_runtime() -> Iterator[None]:
    """Keep a quiet lib_log_rich runtime live for every test.

    CLI commands bind logging scopes, which needs an initialised runtime
    even when the services under test skip logging setup. ``main`` shuts
    the runtime down, so it is re-initialised per test.
    """
    from bland.adapters.logging.setup import init_logging

    init_logging(Config({"lib_log_rich": {"environment": "test", "console_level": "CRITICAL"}}, {}))
    yield


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for clean output (e.g. JSON parsing) so error
    lines written to stderr do not contaminate it.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from bland.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test.

    Use this whenever a test reads or mutates the global
    ``lib_cli_exit_tools.config`` traceback flags.
    """
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before each test.

    Only clears before, not after, so a monkeypatched ``get_config``
    without ``cache_clear`` does not break teardown.
    """
    from bland.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts.

    Example:
        def test_store_section(config_factory: Callable[[dict[str, Any]], Config]) -> None:
            config = config_factory({"store": {"compression": True}})
            assert config.get("store.compression") is True
    """

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def store_key_env(monkeypatch: pytest.MonkeyPatch) -> str:
    """Export the fixed test key as ``BLAND_STORE_KEY`` and return its hex form."""
    monkeypatch.setenv("BLAND_STORE_KEY", TEST_KEY_HEX)
    return TEST_KEY_HEX


@pytest.fixture
def inject_config(
    clear_config_cache: None,
) -> Callable[[Config], Callable[[], AppServices]]:
    """Return a factory that provides production services with an injected Config.

    Only the I/O boundary (``get_config``) and logging initialisation are
    replaced; store settings, backends and display stay production-wired.

    Example:
        def test_config_display(cli_runner, config_factory, inject_config) -> None:
            factory = inject_config(config_factory({"store": {"compression": True}}))
            result = cli_runner.invoke(cli, ["config"], obj=factory)
            assert "compression" in result.output
    """
    from bland.adapters.memory import init_logging_in_memory
    from bland.composition import build_production

    def _inject(config: Config) -> Callable[[], AppServices]:
        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = dataclasses.replace(
            build_production(),
            get_config=_fake_get_config,
            init_logging=init_logging_in_memory,
        )
        return lambda: test_services

    return _inject


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a factory whose get_config records the profile it was called with."""
    from bland.adapters.memory import init_logging_in_memory
    from bland.composition import build_production

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        test_services = dataclasses.replace(
            build_production(),
            get_config=_capturing_get_config,
            init_logging=init_logging_in_memory,
        )
        return lambda: test_services

    return _inject


@dataclass
class StoreCliContext:
    """Container for in-memory store CLI test setup.

    Attributes:
        factory: Callable that returns wired AppServices for CLI invocation.
        backend: InMemoryBackend shared by every command the factory serves.
        logging: LoggingSpy recording logging initialisation.
    """

    factory: Callable[[], Any]
    backend: InMemoryBackend
    logging: LoggingSpy


@pytest.fixture
def store_cli_context(
    clear_config_cache: None,
) -> Callable[..., StoreCliContext]:
    """Create a store CLI context backed by one shared InMemoryBackend.

    Returns a function taking the ``[store]`` section contents (or None for
    defaults) and an optional pre-filled backend.

    Example:
        def test_set_then_get(cli_runner, store_cli_context) -> None:
            ctx = store_cli_context({"compression": True})
            cli_runner.invoke(cli, ["set", "a", "1"], obj=ctx.factory)
            result = cli_runner.invoke(cli, ["get", "a"], obj=ctx.factory)
            assert result.stdout.strip() == "1"
    """
    from bland.composition import build_testing

    def _create(
        store_section: dict[str, Any] | None = None,
        *,
        backend: InMemoryBackend | None = None,
    ) -> StoreCliContext:
        shared = backend if backend is not None else InMemoryBackend()
        spy = LoggingSpy()
        config = Config({"store": store_section} if store_section else {}, {})

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = dataclasses.replace(
            build_testing(backend=shared, logging_spy=spy),
            get_config=_fake_get_config,
        )
        return StoreCliContext(factory=lambda: test_services, backend=shared, logging=spy)

    return _create

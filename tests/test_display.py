"""Display wrappers: layered configuration and store contents.

Configuration display delegates to lib_layered_config; only the wrapper
integration is checked here. Store contents are rendered locally, so the
tree and JSON renderings get their own stories.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from typing import Any

import orjson
import pytest
from lib_layered_config import Config
from rich.console import Console

from bland.adapters.config.display import display_config, display_mapping, render_mapping_json
from bland.domain.enums import OutputFormat


def _console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=120, color_system=None), buffer


# ======================== display_config - wrapper integration ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize("fmt", [OutputFormat.HUMAN, OutputFormat.JSON])
def test_display_config_raises_for_nonexistent_section(
    fmt: OutputFormat,
    config_factory: Callable[[dict[str, Any]], Config],
) -> None:
    """Requesting a section that doesn't exist must raise ValueError."""
    config = config_factory({"store": {"compression": True}})

    with pytest.raises(ValueError, match="not found"):
        display_config(config, output_format=fmt, section="nonexistent")


@pytest.mark.os_agnostic
def test_display_config_human_renders_store_section(capsys: pytest.CaptureFixture[str]) -> None:
    config = Config({"store": {"compression": False, "key_env": "BLAND_STORE_KEY"}}, {})

    display_config(config, output_format=OutputFormat.HUMAN, section="store")

    output = capsys.readouterr().out
    assert "compression = false" in output
    assert "BLAND_STORE_KEY" in output


@pytest.mark.os_agnostic
def test_display_config_json_renders_falsey_values(capsys: pytest.CaptureFixture[str]) -> None:
    """Falsey values are shown rather than treated as a missing section."""
    config = Config({"store": {"compression_level": 0, "crypto": False}}, {})

    display_config(config, output_format=OutputFormat.JSON, section="store")

    output = capsys.readouterr().out
    assert '"compression_level": 0' in output
    assert '"crypto": false' in output


# ======================== display_mapping ========================


@pytest.mark.os_agnostic
def test_display_mapping_json_is_parseable() -> None:
    console, buffer = _console()
    mapping = {"server": {"port": 8080, "hosts": ["a", "b"]}, "debug": True}

    display_mapping(mapping, output_format=OutputFormat.JSON, console=console)

    assert orjson.loads(buffer.getvalue()) == mapping


@pytest.mark.os_agnostic
def test_display_mapping_human_renders_nested_keys() -> None:
    console, buffer = _console()

    display_mapping({"server": {"port": 8080}}, console=console, title="store (none)")

    output = buffer.getvalue()
    assert "store (none)" in output
    assert "server" in output
    assert "port = 8080" in output


@pytest.mark.os_agnostic
def test_display_mapping_human_marks_empty_store() -> None:
    console, buffer = _console()

    display_mapping({}, console=console)

    assert "(empty)" in buffer.getvalue()


@pytest.mark.os_agnostic
def test_display_mapping_escapes_rich_markup_in_values() -> None:
    """Stored strings that look like markup print literally."""
    console, buffer = _console()

    display_mapping({"note": "[bold]not bold[/bold]"}, console=console)

    assert "[bold]not bold[/bold]" in buffer.getvalue()


@pytest.mark.os_agnostic
def test_render_mapping_json_indents_two_spaces() -> None:
    assert render_mapping_json({"a": {"b": 1}}) == '{\n  "a": {\n    "b": 1\n  }\n}'

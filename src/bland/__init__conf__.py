"""Static package metadata surfaced to CLI commands and documentation.

Values mirror ``pyproject.toml`` so the CLI can report them without
importing packaging metadata at runtime.

Contents:
    * Module-level metadata constants (name, title, version, ...).
    * ``LAYEREDCONF_*`` identifiers used by lib_layered_config path discovery.
    * :func:`print_info` - renders the metadata block for ``bland info``.
"""

from __future__ import annotations

#: Distribution name declared in ``pyproject.toml``.
name = "bland"
#: Human-readable summary shown in CLI help output.
title = "Persistent key-value configuration store with optional compression or encryption"
#: Current release version.
version = "0.3.0"
#: Repository homepage presented to users.
homepage = "https://github.com/bland-store/bland"
#: Author attribution surfaced in CLI output.
author = "bland contributors"
#: Contact email surfaced in CLI output.
author_email = "maintainers@bland-store.dev"
#: Console-script name published by the package.
shell_command = "bland"

#: Vendor identifier for lib_layered_config (macOS/Windows paths).
LAYEREDCONF_VENDOR: str = "bland"
#: Application name for lib_layered_config (macOS/Windows paths).
LAYEREDCONF_APP: str = "bland"
#: Configuration slug for lib_layered_config (Linux paths, env prefix).
LAYEREDCONF_SLUG: str = "bland"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for bland:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))

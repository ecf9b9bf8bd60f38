# SPDX-License-Identifier: MIT
"""Data structures for the generate CLI command."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any

import typer

CATALOG_ARGUMENT = Annotated[
    Path,
    typer.Argument(metavar="CATALOG", help="JSON dump of the remote package catalog."),
]
OUTPUT_OPTION = Annotated[
    Path | None,
    typer.Option("--output", "-o", help="Write the Nix expression here instead of stdout."),
]
LICENSES_OUTPUT_OPTION = Annotated[
    Path | None,
    typer.Option("--licenses-output", help="Also write the license set to this file."),
]
INDENT_OPTION = Annotated[
    int | None,
    typer.Option("--indent", min=0, max=16, help="Spaces per nesting level."),
]
BASE_URL_OPTION = Annotated[
    str | None,
    typer.Option("--base-url", help="Base URL for relative archive references."),
]
CONFIG_OPTION = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Additional TOML configuration file."),
]
ROOT_OPTION = Annotated[
    Path,
    typer.Option("--root", "-r", help="Project root searched for configuration."),
]
QUIET_OPTION = Annotated[
    bool,
    typer.Option("--quiet", "-q", help="Suppress per-archive diagnostic lines."),
]
NO_COLOR_OPTION = Annotated[
    bool,
    typer.Option("--no-color", help="Disable ANSI colour output."),
]
NO_EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--no-emoji", help="Disable emoji output."),
]


@dataclass(slots=True)
class GenerateCLIOptions:
    """Normalised CLI inputs for the generate command."""

    catalog: Path
    root: Path
    config_path: Path | None
    overrides: dict[str, Any]
    quiet: bool
    use_color: bool
    use_emoji: bool


def build_generate_options(
    catalog: Path,
    *,
    output: Path | None,
    licenses_output: Path | None,
    indent: int | None,
    base_url: str | None,
    config: Path | None,
    root: Path,
    quiet: bool,
    no_color: bool,
    no_emoji: bool,
) -> GenerateCLIOptions:
    """Construct ``GenerateCLIOptions`` from Typer parameters."""

    return GenerateCLIOptions(
        catalog=catalog.expanduser().resolve(),
        root=root.expanduser().resolve(),
        config_path=config.expanduser().resolve() if config else None,
        overrides={
            "output": output,
            "licenses_output": licenses_output,
            "indent": indent,
            "base_url": base_url,
        },
        quiet=quiet,
        use_color=not no_color,
        use_emoji=not no_emoji,
    )


__all__ = [
    "BASE_URL_OPTION",
    "CATALOG_ARGUMENT",
    "CONFIG_OPTION",
    "GenerateCLIOptions",
    "INDENT_OPTION",
    "LICENSES_OUTPUT_OPTION",
    "NO_COLOR_OPTION",
    "NO_EMOJI_OPTION",
    "OUTPUT_OPTION",
    "QUIET_OPTION",
    "ROOT_OPTION",
    "build_generate_options",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands."""

from __future__ import annotations

from .generate import generate
from .typer_ext import SortedTyper

app = SortedTyper(
    name="android-repo-nix",
    help="Generate Nix expressions from Android SDK repository catalogs.",
    no_args_is_help=True,
)
app.command(name="generate")(generate)


@app.callback()
def main() -> None:
    """Generate Nix expressions from Android SDK repository catalogs."""


__all__ = ["app"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer application whose command help lists options alphabetically."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import typer
from click.core import Context, Parameter
from click.formatting import HelpFormatter
from typer.core import TyperArgument, TyperCommand


def _sort_key(param: Parameter) -> str:
    """Return the first long option name of ``param`` without dashes."""

    names = [*param.opts, *param.secondary_opts]
    name = next((name for name in names if name.startswith("--")), names[0] if names else param.name or "")
    return name.lstrip("-").lower()


class SortedHelpCommand(TyperCommand):
    """Command that lists positional arguments first, then options sorted by name."""

    def format_options(self, ctx: Context, formatter: HelpFormatter) -> None:
        arguments: list[tuple[str, str]] = []
        options: list[tuple[str, tuple[str, str]]] = []
        for param in self.get_params(ctx):
            record = param.get_help_record(ctx)
            if record is None:
                continue
            if isinstance(param, TyperArgument):
                arguments.append(record)
            else:
                options.append((_sort_key(param), record))
        options.sort(key=lambda entry: entry[0])
        for title, records in (("Arguments", arguments), ("Options", [record for _, record in options])):
            if records:
                with formatter.section(title):
                    formatter.write_dl(records)


class SortedTyper(typer.Typer):
    """Typer application registering every command as a :class:`SortedHelpCommand`."""

    def command(self, name: str | None = None, **kwargs: Any) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        kwargs.setdefault("cls", SortedHelpCommand)
        return super().command(name, **kwargs)


__all__ = ["SortedHelpCommand", "SortedTyper"]

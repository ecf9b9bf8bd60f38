# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI command that renders a package catalog into a Nix expression."""

from __future__ import annotations

import os
from pathlib import Path

import typer

from ..catalog.errors import CatalogIntegrityError, CatalogValidationError
from ..catalog.loader import CatalogLoader
from ..config import ConfigError, OverrideConfigSource, default_sources, load_config
from ..generator.assembler import DiagnosticSink, assemble
from ..generator.errors import GenerationError
from ..generator.resolver import RepositoryUrlResolver
from ..logging import detail, fail, info, ok, warn
from ._generate_cli_models import (
    BASE_URL_OPTION,
    CATALOG_ARGUMENT,
    CONFIG_OPTION,
    INDENT_OPTION,
    LICENSES_OUTPUT_OPTION,
    NO_COLOR_OPTION,
    NO_EMOJI_OPTION,
    OUTPUT_OPTION,
    QUIET_OPTION,
    ROOT_OPTION,
    GenerateCLIOptions,
    build_generate_options,
)

_FATAL_ERRORS = (
    CatalogIntegrityError,
    CatalogValidationError,
    ConfigError,
    GenerationError,
    OSError,
)


def generate(
    catalog: CATALOG_ARGUMENT,
    output: OUTPUT_OPTION = None,
    licenses_output: LICENSES_OUTPUT_OPTION = None,
    indent: INDENT_OPTION = None,
    base_url: BASE_URL_OPTION = None,
    config: CONFIG_OPTION = None,
    root: ROOT_OPTION = Path("."),
    quiet: QUIET_OPTION = False,
    no_color: NO_COLOR_OPTION = False,
    no_emoji: NO_EMOJI_OPTION = False,
) -> None:
    """Generate the Nix expression for a package catalog.

    Raises:
        typer.Exit: With status 1 when loading, configuration or generation fails.
    """
    options = build_generate_options(
        catalog,
        output=output,
        licenses_output=licenses_output,
        indent=indent,
        base_url=base_url,
        config=config,
        root=root,
        quiet=quiet,
        no_color=no_color,
        no_emoji=no_emoji,
    )
    try:
        _run_generate(options)
    except _FATAL_ERRORS as exc:
        fail(str(exc), use_emoji=options.use_emoji, use_color=options.use_color)
        raise typer.Exit(code=1) from exc


def _run_generate(options: GenerateCLIOptions) -> None:
    """Load configuration and catalog, render everything, then write the results."""

    sources = default_sources(options.root, options.config_path)
    sources.append(OverrideConfigSource(options.overrides, name="command line"))
    settings = load_config(sources).config

    packages = CatalogLoader(options.catalog).load()
    if not packages:
        warn(f"No packages found in {options.catalog}", use_emoji=options.use_emoji, use_color=options.use_color)
    elif not options.quiet:
        info(f"Loaded {len(packages)} packages from {options.catalog}", use_emoji=options.use_emoji, use_color=options.use_color)

    repository = assemble(
        packages,
        resolver=RepositoryUrlResolver(base_url=settings.base_url),
        report=_diagnostic_sink(options),
        header=settings.header,
    )
    document = repository.render(settings.indent) + "\n"
    licenses = repository.render_licenses(settings.indent) + "\n" if settings.licenses_output else None

    outputs = [(document, settings.output)]
    if licenses is not None:
        outputs.append((licenses, settings.licenses_output))
    _emit(outputs, options)


def _diagnostic_sink(options: GenerateCLIOptions) -> DiagnosticSink:
    if options.quiet:
        return lambda _line: None

    def _report(line: str) -> None:
        detail(line, use_color=options.use_color)

    return _report


def _emit(outputs: list[tuple[str, Path | None]], options: GenerateCLIOptions) -> None:
    """Write each ``(text, destination)`` pair to its file, or to stdout when unset.

    Every file is staged before any destination is replaced, and staging files
    never outlive the call.
    """

    staged: list[tuple[Path, Path]] = []
    try:
        for text, destination in outputs:
            if destination is None:
                continue
            destination.parent.mkdir(parents=True, exist_ok=True)
            staging = destination.with_name(f".{destination.name}.tmp")
            staged.append((staging, destination))
            staging.write_text(text, encoding="utf-8")
        for text, destination in outputs:
            if destination is None:
                typer.echo(text, nl=False)
        for staging, destination in staged:
            os.replace(staging, destination)
            ok(f"Wrote {destination}", use_emoji=options.use_emoji, use_color=options.use_color)
    finally:
        for staging, _destination in staged:
            staging.unlink(missing_ok=True)



__all__ = ["generate"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Assemble the document model from a catalog of remote packages."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable, Mapping
from operator import attrgetter

from ..catalog.model_package import LicenseRef, RemotePackage
from ..catalog.types import PATH_SEPARATOR
from ..document.model import DEFAULT_HEADER, License, Package, Repository, Source
from .attrpath import attrpath
from .builders import package_builder
from .checksum import format_checksum
from .platforms import platform_tag
from .resolver import UrlResolver, resolve_url
from .sanitize import sanitize

LOGGER = logging.getLogger(__name__)

DiagnosticSink = Callable[[str], None]


def _log_diagnostic(line: str) -> None:
    LOGGER.info(line)


def package_dir(path: str) -> str:
    """Return ``path`` as a directory path using the platform separator."""

    return path.replace(PATH_SEPARATOR, os.sep)


def build_package(
    package: RemotePackage,
    *,
    resolver: UrlResolver = resolve_url,
    report: DiagnosticSink = _log_diagnostic,
) -> Package:
    """Convert one remote package into its document representation.

    Args:
        package: Package descriptor to convert.
        resolver: Collaborator resolving archive download references.
        report: Sink receiving one ``{path}-{version}: {url}`` line per archive.

    Returns:
        Package: Document entry for ``package``.

    Raises:
        UnknownPlatformError: If an archive has an unrecognised host OS or architecture.
        UnknownChecksumError: If an archive checksum uses an unsupported algorithm.
        Exception: Anything raised by ``resolver`` propagates unchanged.
    """

    version = package.revision()
    sources: list[Source] = []
    for archive in package.archives:
        url = resolver(archive.complete.url, package)
        report(f"{package.path}-{version}: {url}")
        sources.append(
            Source(
                platform=platform_tag(archive),
                url=url,
                checksum=format_checksum(archive.complete.checksum),
            ),
        )
    return Package(
        id=package.path,
        path=attrpath(package.path),
        pname=sanitize(package.path),
        version=version,
        builder=package_builder(package),
        sources=tuple(sources),
        display_name=package.display_name,
        package_dir=package_dir(package.path),
        license=License.from_ref(package.license),
    )


def collect_licenses(refs: Iterable[LicenseRef]) -> tuple[License, ...]:
    """Return licenses unique by id (first occurrence wins), ordered by id."""

    unique: dict[str, LicenseRef] = {}
    for ref in refs:
        unique.setdefault(ref.id, ref)
    return tuple(License.from_ref(unique[license_id]) for license_id in sorted(unique))


def assemble(
    packages: Mapping[str, object],
    *,
    resolver: UrlResolver = resolve_url,
    report: DiagnosticSink | None = None,
    header: str = DEFAULT_HEADER,
) -> Repository:
    """Build the complete document for a package catalog.

    Packages are ordered by raw path and licenses by id regardless of the
    iteration order of ``packages``. Entries that are not
    :class:`RemotePackage` instances are skipped. Any error aborts the whole
    run; nothing partial is returned.

    Args:
        packages: Catalog mapping package keys to descriptors.
        resolver: Collaborator resolving archive download references.
        report: Sink for per-archive diagnostic lines; defaults to the module logger.
        header: Comment line placed at the top of the document.

    Returns:
        Repository: Document ready to render.
    """

    sink = report or _log_diagnostic
    remote = sorted(
        (package for package in packages.values() if isinstance(package, RemotePackage)),
        key=attrgetter("path"),
    )
    built = tuple(build_package(package, resolver=resolver, report=sink) for package in remote)
    seen: dict[str, str] = {}
    for package in built:
        if package.key in seen:
            LOGGER.warning("Packages %s and %s share attribute name %s", seen[package.key], package.id, package.key)
        seen.setdefault(package.key, package.id)
    return Repository(
        packages=built,
        licenses=collect_licenses(package.license for package in remote),
        header=header,
    )


__all__ = ["DiagnosticSink", "assemble", "build_package", "collect_licenses", "package_dir"]

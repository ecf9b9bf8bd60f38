# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Loader that materialises package catalogs from JSON dumps."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .io import load_document
from .model_package import RemotePackage
from .schema import CatalogSchema, bundled_schema
from .types import JSONValue
from .utils import expect_mapping, optional_string

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class CatalogLoader:
    """Validate a catalog document and build its remote package descriptors."""

    catalog_path: Path
    schema_path: Path | None = None
    _schema: CatalogSchema = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Bind the schema validator after dataclass setup."""

        self._schema = bundled_schema() if self.schema_path is None else CatalogSchema.load(self.schema_path)

    def load(self) -> dict[str, RemotePackage]:
        """Read, validate and convert the catalog document.

        Returns:
            dict[str, RemotePackage]: Package descriptors keyed by catalog key.

        Raises:
            FileNotFoundError: If the catalog file does not exist.
            CatalogIntegrityError: If the document cannot be parsed or is inconsistent.
            CatalogValidationError: If the document fails schema validation.
        """

        document = load_document(self.catalog_path)
        packages = packages_from_document(document, schema=self._schema, context=str(self.catalog_path))
        LOGGER.debug("Loaded %d packages from %s", len(packages), self.catalog_path)
        return packages


def packages_from_document(
    document: Mapping[str, JSONValue],
    *,
    schema: CatalogSchema | None = None,
    context: str = "<catalog>",
) -> dict[str, RemotePackage]:
    """Convert an in-memory catalog document into package descriptors.

    Args:
        document: Parsed catalog document.
        schema: Optional schema override; the bundled schema is used otherwise.
        context: Human-readable context used in error messages.

    Returns:
        dict[str, RemotePackage]: Package descriptors keyed by catalog key.
    """

    (schema or bundled_schema()).validate(document, context=context)
    repository_url = optional_string(document.get("repositoryUrl"), key="repositoryUrl", context=context)
    entries = expect_mapping(document.get("packages"), key="packages", context=context)
    packages: dict[str, RemotePackage] = {}
    for key, entry in entries.items():
        entry_context = f"{context}.packages[{key}]"
        packages[key] = RemotePackage.from_mapping(
            expect_mapping(entry, key=key, context=entry_context),
            key=key,
            repository_url=repository_url,
            context=entry_context,
        )
    return packages


__all__ = ["CatalogLoader", "packages_from_document"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Schema loading utilities for validating catalog documents."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Final

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

from .errors import CatalogValidationError
from .types import JSONValue

CATALOG_SCHEMA_NAME: Final[str] = "catalog.schema.json"


@dataclass(slots=True)
class CatalogSchema:
    """Validator bound to the catalog JSON schema."""

    validator: Draft202012Validator

    @classmethod
    def load(cls, schema_path: Path | None = None) -> CatalogSchema:
        """Load the catalog schema from ``schema_path`` or the bundled copy.

        Args:
            schema_path: Optional override for the schema document.

        Returns:
            CatalogSchema: Schema wrapper ready to validate catalog documents.
        """
        if schema_path is None:
            text = resources.files(__package__).joinpath("schema", CATALOG_SCHEMA_NAME).read_text(encoding="utf-8")
        else:
            text = schema_path.read_text(encoding="utf-8")
        schema = json.loads(text)
        Draft202012Validator.check_schema(schema)
        return cls(validator=Draft202012Validator(schema))

    def validate(self, document: Mapping[str, JSONValue], *, context: str) -> None:
        """Validate ``document`` and raise on the first structural problem.

        Args:
            document: Parsed catalog document.
            context: Human-readable context used in error messages.

        Raises:
            CatalogValidationError: When the document fails schema validation.
        """
        try:
            self.validator.validate(document)
        except ValidationError as exc:
            location = "/".join(str(part) for part in exc.absolute_path) or "<root>"
            raise CatalogValidationError(f"{context}: {location}: {exc.message}") from exc


@lru_cache(maxsize=1)
def bundled_schema() -> CatalogSchema:
    """Return the cached schema shipped with the package."""
    return CatalogSchema.load()


__all__ = ["CATALOG_SCHEMA_NAME", "CatalogSchema", "bundled_schema"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""I/O helpers for reading catalog JSON documents and schemas."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import cast

from .errors import CatalogIntegrityError
from .types import JSONValue


def load_document(path: Path) -> Mapping[str, JSONValue]:
    """Load a JSON document from disk and ensure it is a JSON object.

    Args:
        path: Filesystem path to the JSON document.

    Returns:
        Mapping[str, JSONValue]: Parsed JSON object.

    Raises:
        FileNotFoundError: If the JSON document is missing.
        CatalogIntegrityError: If the document cannot be parsed or is not a JSON object.
    """
    if not path.exists():
        raise FileNotFoundError(path)
    with path.open("r", encoding="utf-8") as stream:
        try:
            payload = cast(JSONValue, json.load(stream))
        except json.JSONDecodeError as exc:
            raise CatalogIntegrityError(f"{path}: failed to parse catalog JSON: {exc.msg}") from exc
    if not isinstance(payload, Mapping):
        raise CatalogIntegrityError(f"{path}: expected a JSON object")
    return payload


__all__ = ["load_document"]

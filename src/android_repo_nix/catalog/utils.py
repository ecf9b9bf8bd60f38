# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Typed accessors for raw catalog JSON values.

Each helper takes the raw value, the attribute ``key`` and a ``context`` prefix
naming the package or archive being read, and raises
:class:`~android_repo_nix.catalog.errors.CatalogIntegrityError` with both when
the value has the wrong shape.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .errors import CatalogIntegrityError
from .types import JSONValue


def _mismatch(context: str, key: str, expected: str) -> CatalogIntegrityError:
    return CatalogIntegrityError(f"{context}: expected '{key}' to be {expected}")


def expect_string(value: JSONValue | None, *, key: str, context: str) -> str:
    """Return ``value`` when it is a string."""

    if not isinstance(value, str):
        raise _mismatch(context, key, "a string")
    return value


def optional_string(value: JSONValue | None, *, key: str, context: str) -> str | None:
    """Return ``value`` when it is a string, or ``None`` when absent."""

    return None if value is None else expect_string(value, key=key, context=context)


def optional_int(value: JSONValue | None, *, key: str, context: str) -> int:
    """Return ``value`` as a non-negative integer; absent values count as ``0``."""

    if value is None:
        return 0
    # bool is an int subclass but never a valid revision component or size.
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise _mismatch(context, key, "a non-negative integer")
    return value


def expect_mapping(value: JSONValue | None, *, key: str, context: str) -> Mapping[str, JSONValue]:
    """Return ``value`` when it is a JSON object."""

    if not isinstance(value, Mapping):
        raise _mismatch(context, key, "an object")
    return value


def mapping_array(value: JSONValue | None, *, key: str, context: str) -> tuple[Mapping[str, JSONValue], ...]:
    """Return the objects of the JSON array ``value``; absent arrays are empty."""

    if value is None:
        return ()
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise _mismatch(context, key, "an array of objects")
    return tuple(expect_mapping(item, key=f"{key}[{index}]", context=context) for index, item in enumerate(value))


__all__ = [
    "expect_mapping",
    "expect_string",
    "mapping_array",
    "optional_int",
    "optional_string",
]

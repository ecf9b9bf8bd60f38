# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Derive hierarchical attribute paths from repository package paths."""

from __future__ import annotations

from functools import reduce
from typing import Final

from ..catalog.types import PATH_SEPARATOR
from .sanitize import sanitize

LATEST_TOKEN: Final[str] = "latest"

AttrPath = tuple[str, ...]


def is_version_suffix(segment: str) -> bool:
    """Return ``True`` when ``segment`` is a numeric or ``latest`` version suffix."""

    return segment[:1].isdigit() or segment == LATEST_TOKEN


def _fold_segment(acc: AttrPath, segment: str) -> AttrPath:
    if acc and is_version_suffix(segment):
        return (*acc[:-1], f"{acc[-1]}-{segment}")
    return (*acc, segment)


def attrpath(path: str) -> AttrPath:
    """Split ``path`` into sanitised segments, merging version suffixes into their parent.

    ``build-tools;30.0.3`` becomes ``("build-tools-30-0-3",)`` while
    ``extras;google;usb_driver`` stays nested as three segments. The first
    segment is never merged.

    Args:
        path: Semicolon-delimited repository path.

    Returns:
        AttrPath: One or more attribute name segments.
    """

    segments = (sanitize(segment) for segment in path.split(PATH_SEPARATOR))
    return reduce(_fold_segment, segments, ())


def attr_name(path: AttrPath) -> str:
    """Join ``path`` into the flat attribute name used as the package key."""

    return "-".join(path)


__all__ = ["LATEST_TOKEN", "AttrPath", "attr_name", "attrpath", "is_version_suffix"]

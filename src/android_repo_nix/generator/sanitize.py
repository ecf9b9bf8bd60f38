# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Identifier sanitisation for attribute names."""

from __future__ import annotations

import re
from typing import Final

_SYMBOLS: Final[re.Pattern[str]] = re.compile(r"[ _.;]")


def sanitize(value: str) -> str:
    """Replace spaces, underscores, periods and semicolons in ``value`` with hyphens.

    Inputs that differ only in which of those characters they use collapse to
    the same token.

    Args:
        value: Raw path or path segment.

    Returns:
        str: Sanitised token.
    """

    return _SYMBOLS.sub("-", value)


__all__ = ["sanitize"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Depth-tracking helpers that render Nix attribute sets.

Rendered values are sequences of ``(depth, text)`` lines. Nesting a value
inside a set only bumps the depth of its lines; real whitespace is emitted once
by :func:`format_lines`, so the indent width is a single formatting choice.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from typing import Final, TypeAlias

Line: TypeAlias = tuple[int, str]
Lines: TypeAlias = tuple[Line, ...]

DEFAULT_INDENT: Final[int] = 2

_IDENTIFIER: Final[re.Pattern[str]] = re.compile(r"[A-Za-z_][A-Za-z0-9_'-]*")
_KEYWORDS: Final[frozenset[str]] = frozenset(
    {"assert", "else", "if", "in", "inherit", "let", "or", "rec", "then", "with"},
)
_STRING_ESCAPES: Final[tuple[tuple[str, str], ...]] = (
    ("\\", "\\\\"),
    ('"', '\\"'),
    ("${", "\\${"),
    ("\n", "\\n"),
    ("\r", "\\r"),
    ("\t", "\\t"),
)


def string_literal(value: str) -> str:
    """Return ``value`` as a double-quoted Nix string."""

    for raw, escaped in _STRING_ESCAPES:
        value = value.replace(raw, escaped)
    return f'"{value}"'


def attr_key(name: str) -> str:
    """Return ``name`` as an attribute key, quoting it when it is not a bare identifier."""

    if _IDENTIFIER.fullmatch(name) and name not in _KEYWORDS:
        return name
    return string_literal(name)


def literal(text: str) -> Lines:
    """Wrap already-rendered single-line ``text`` as a value."""

    return ((0, text),)


def string_value(value: str) -> Lines:
    """Render ``value`` as a string value."""

    return literal(string_literal(value))


def prefixed(prefix: str, value: Lines) -> Lines:
    """Prepend ``prefix`` to the first line of ``value``."""

    (depth, head), *rest = value
    return ((depth, f"{prefix}{head}"), *rest)


def attr_set(entries: Iterable[tuple[str, Lines]]) -> Lines:
    """Render ``entries`` as a ``{ key = value; ... }`` set, one attribute per line.

    Args:
        entries: Ordered ``(name, value)`` pairs.

    Returns:
        Lines: Rendered set; an empty set keeps a blank line between its braces.
    """

    body: list[Line] = []
    for name, value in entries:
        (_, head), *rest = value
        entry = [(1, f"{attr_key(name)} = {head}"), *((depth + 1, text) for depth, text in rest)]
        last_depth, last_text = entry[-1]
        entry[-1] = (last_depth, f"{last_text};")
        body.extend(entry)
    if not body:
        return ((0, "{"), (0, ""), (0, "}"))
    return ((0, "{"), *body, (0, "}"))


def format_lines(lines: Sequence[Line], indent: int = DEFAULT_INDENT) -> str:
    """Join ``lines`` into text, indenting each by ``indent`` spaces per depth level.

    Raises:
        ValueError: If ``indent`` is negative.
    """

    if indent < 0:
        raise ValueError(f"indent must be non-negative, got {indent}")
    pad = " " * indent
    return "\n".join(f"{pad * depth}{text}" if text else "" for depth, text in lines)


__all__ = [
    "DEFAULT_INDENT",
    "Line",
    "Lines",
    "attr_key",
    "attr_set",
    "format_lines",
    "literal",
    "prefixed",
    "string_literal",
    "string_value",
]

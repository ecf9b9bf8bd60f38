# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Normalise archive checksums into Nix fetcher attributes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final

from ..catalog.model_archive import Checksum
from ..document.render import string_literal
from .errors import UnknownChecksumError

CHECKSUM_ALGORITHMS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "sha1": "sha1",
        "sha-1": "sha1",
        "sha256": "sha256",
        "sha-256": "sha256",
        "sha512": "sha512",
        "sha-512": "sha512",
    },
)


@dataclass(frozen=True, slots=True)
class NixChecksum:
    """Checksum with a normalised algorithm name."""

    algorithm: str
    value: str

    def render(self) -> str:
        """Return the ``algorithm = "value"`` attribute text."""

        return f"{self.algorithm} = {string_literal(self.value)}"


def normalize_algorithm(algorithm: str) -> str:
    """Return the Nix attribute name for ``algorithm``.

    Raises:
        UnknownChecksumError: If ``algorithm`` is not one of the lowercase SHA-1/256/512 spellings.
    """

    try:
        return CHECKSUM_ALGORITHMS[algorithm]
    except KeyError:
        raise UnknownChecksumError(algorithm) from None


def format_checksum(checksum: Checksum) -> NixChecksum:
    """Return ``checksum`` with its algorithm normalised."""

    return NixChecksum(algorithm=normalize_algorithm(checksum.algorithm), value=checksum.value)


__all__ = ["CHECKSUM_ALGORITHMS", "NixChecksum", "format_checksum", "normalize_algorithm"]

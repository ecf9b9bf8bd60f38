# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Fatal errors raised while generating the Nix expression."""

from __future__ import annotations


class GenerationError(RuntimeError):
    """Base class for failures that abort generation."""


class UnknownPlatformError(GenerationError):
    """Raised when an archive declares an unrecognised host OS or architecture."""

    def __init__(self, kind: str, value: str) -> None:
        """Record the offending ``kind`` (``os`` or ``arch``) and ``value``."""

        super().__init__(f"Unknown {kind}: {value}")
        self.kind = kind
        self.value = value


class UnknownChecksumError(GenerationError):
    """Raised when a checksum uses an unsupported algorithm."""

    def __init__(self, algorithm: str) -> None:
        """Record the offending ``algorithm``."""

        super().__init__(f"Unknown checksum type: {algorithm}")
        self.algorithm = algorithm


class UrlResolutionError(GenerationError):
    """Raised when a download reference cannot be turned into a URL."""


__all__ = [
    "GenerationError",
    "UnknownChecksumError",
    "UnknownPlatformError",
    "UrlResolutionError",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Archive and checksum models for remote package descriptors."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

from .types import JSONValue
from .utils import expect_mapping, expect_string, optional_int, optional_string

# Repository manifests predating typed checksums only ever carried SHA-1 digests.
LEGACY_CHECKSUM_TYPE: Final[str] = "sha1"


@dataclass(frozen=True, slots=True)
class Checksum:
    """Raw checksum as declared by the repository manifest."""

    algorithm: str
    value: str

    @staticmethod
    def from_json(data: JSONValue | None, *, context: str) -> Checksum:
        """Create a checksum from a typed mapping or a legacy bare digest.

        Args:
            data: Either ``{"type": ..., "value": ...}`` or a hex string.
            context: Human-readable context used in error messages.

        Returns:
            Checksum: Frozen checksum metadata.

        Raises:
            CatalogIntegrityError: If the checksum is neither form.
        """
        if isinstance(data, str):
            return Checksum(algorithm=LEGACY_CHECKSUM_TYPE, value=data)
        mapping = expect_mapping(data, key="checksum", context=context)
        return Checksum(
            algorithm=expect_string(mapping.get("type"), key="checksum.type", context=context),
            value=expect_string(mapping.get("value"), key="checksum.value", context=context),
        )


@dataclass(frozen=True, slots=True)
class CompletePayload:
    """Complete (non-patch) download of an archive."""

    url: str
    checksum: Checksum
    size: int = 0

    @staticmethod
    def from_mapping(data: Mapping[str, JSONValue], *, context: str) -> CompletePayload:
        """Create the payload description from JSON data.

        Args:
            data: Mapping describing the complete download.
            context: Human-readable context used in error messages.

        Returns:
            CompletePayload: Frozen payload metadata.
        """
        return CompletePayload(
            url=expect_string(data.get("url"), key="url", context=context),
            checksum=Checksum.from_json(data.get("checksum"), context=context),
            size=optional_int(data.get("size"), key="size", context=context),
        )


@dataclass(frozen=True, slots=True)
class Archive:
    """One platform-specific downloadable payload of a package."""

    complete: CompletePayload
    host_os: str | None = None
    host_arch: str | None = None

    @staticmethod
    def from_mapping(data: Mapping[str, JSONValue], *, context: str) -> Archive:
        """Create an archive from JSON data.

        Args:
            data: Mapping with optional ``hostOs``/``hostArch`` and a ``complete`` payload.
            context: Human-readable context used in error messages.

        Returns:
            Archive: Frozen archive metadata.

        Raises:
            CatalogIntegrityError: If required fields are missing or invalid.
        """
        complete = expect_mapping(data.get("complete"), key="complete", context=context)
        return Archive(
            complete=CompletePayload.from_mapping(complete, context=f"{context}.complete"),
            host_os=optional_string(data.get("hostOs"), key="hostOs", context=context),
            host_arch=optional_string(data.get("hostArch"), key="hostArch", context=context),
        )


__all__ = ["Archive", "Checksum", "CompletePayload", "LEGACY_CHECKSUM_TYPE"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Remote package descriptor models consumed by the generator."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Final

from .errors import CatalogIntegrityError
from .model_archive import Archive
from .types import JSONValue
from .utils import expect_mapping, expect_string, mapping_array, optional_int, optional_string

LOGGER = logging.getLogger(__name__)

PREVIEW_PREFIX: Final[str] = "rc"


class MetadataType(str, Enum):
    """Closed set of package metadata ("type details") categories."""

    SOURCE = "source"
    PLATFORM = "platform"
    EXTRA = "extra"
    ADDON = "addon"
    MAVEN = "maven"
    SYSIMG = "sysimg"
    GENERIC = "generic"

    @classmethod
    def from_raw(cls, raw: str | None) -> MetadataType:
        """Return the category for a raw ``type`` tag.

        Accepts the short names as well as repository ``xsi:type`` spellings
        such as ``sdk:platformDetailsType`` or ``sys-img:sysImgDetailsType``.
        Unrecognised tags classify as :attr:`GENERIC`.

        Args:
            raw: Raw tag sourced from the catalog, or ``None``.

        Returns:
            MetadataType: Matching category.
        """
        if not raw:
            return cls.GENERIC
        token = raw.rsplit(":", 1)[-1].lower().replace("-", "").replace("_", "")
        for suffix in ("type", "details"):
            if token.endswith(suffix) and token != suffix:
                token = token[: -len(suffix)]
        try:
            return cls(token)
        except ValueError:
            LOGGER.debug("Treating unknown metadata type %r as generic", raw)
            return cls.GENERIC


@dataclass(frozen=True, slots=True)
class Revision:
    """Package version descriptor."""

    major: int
    minor: int = 0
    micro: int = 0
    preview: int = 0
    raw: str | None = None

    @staticmethod
    def from_json(data: JSONValue | None, *, context: str) -> Revision:
        """Create a revision from a version string or a component mapping.

        Args:
            data: Version string (kept verbatim) or ``{"major": ..., ...}``.
            context: Human-readable context used in error messages.

        Returns:
            Revision: Frozen version descriptor.
        """
        if isinstance(data, str):
            return Revision(major=0, raw=data)
        mapping = expect_mapping(data, key="version", context=context)
        major = mapping.get("major")
        if major is None:
            raise CatalogIntegrityError(f"{context}: expected 'version.major' to be present")
        return Revision(
            major=optional_int(major, key="version.major", context=context),
            minor=optional_int(mapping.get("minor"), key="version.minor", context=context),
            micro=optional_int(mapping.get("micro"), key="version.micro", context=context),
            preview=optional_int(mapping.get("preview"), key="version.preview", context=context),
        )

    def to_short_string(self) -> str:
        """Return ``major[.minor[.micro]][ rcN]`` omitting trailing zero components."""
        if self.raw is not None:
            return self.raw
        text = str(self.major)
        if self.minor or self.micro:
            text += f".{self.minor}"
        if self.micro:
            text += f".{self.micro}"
        if self.preview:
            text += f" {PREVIEW_PREFIX}{self.preview}"
        return text


@dataclass(frozen=True, slots=True)
class LicenseRef:
    """License referenced by a package."""

    id: str
    hash: str

    @staticmethod
    def from_mapping(data: Mapping[str, JSONValue], *, context: str) -> LicenseRef:
        """Create a license reference from JSON data."""
        return LicenseRef(
            id=expect_string(data.get("id"), key="license.id", context=context),
            hash=expect_string(data.get("hash"), key="license.hash", context=context),
        )


@dataclass(frozen=True, slots=True)
class RemotePackage:
    """Package descriptor as listed by a remote repository."""

    path: str
    display_name: str
    version: Revision
    license: LicenseRef
    type_details: MetadataType
    archives: tuple[Archive, ...]
    source_url: str | None = None

    @staticmethod
    def from_mapping(
        data: Mapping[str, JSONValue],
        *,
        key: str,
        repository_url: str | None = None,
        context: str,
    ) -> RemotePackage:
        """Create a remote package from JSON data.

        Args:
            data: Mapping describing the package.
            key: Catalog key; used as the path when ``path`` is absent.
            repository_url: Manifest URL inherited when the package has no ``sourceUrl``.
            context: Human-readable context used in error messages.

        Returns:
            RemotePackage: Frozen package descriptor.

        Raises:
            CatalogIntegrityError: If required fields are missing or invalid.
        """
        path = optional_string(data.get("path"), key="path", context=context) or key
        license_data = expect_mapping(data.get("license"), key="license", context=context)
        archives = mapping_array(data.get("archives"), key="archives", context=context)
        return RemotePackage(
            path=path,
            display_name=expect_string(data.get("displayName"), key="displayName", context=context),
            version=Revision.from_json(data.get("version"), context=context),
            license=LicenseRef.from_mapping(license_data, context=context),
            type_details=MetadataType.from_raw(optional_string(data.get("type"), key="type", context=context)),
            archives=tuple(
                Archive.from_mapping(archive, context=f"{context}.archives[{index}]")
                for index, archive in enumerate(archives)
            ),
            source_url=optional_string(data.get("sourceUrl"), key="sourceUrl", context=context) or repository_url,
        )

    def revision(self) -> str:
        """Return the short version string with spaces replaced by hyphens."""
        return self.version.to_short_string().replace(" ", "-")


__all__ = ["LicenseRef", "MetadataType", "RemotePackage", "Revision"]

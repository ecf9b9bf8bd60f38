# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Input catalog models and loaders."""

from __future__ import annotations

from .errors import CatalogIntegrityError, CatalogValidationError
from .loader import CatalogLoader, packages_from_document
from .model_archive import Archive, Checksum, CompletePayload
from .model_package import LicenseRef, MetadataType, RemotePackage, Revision

__all__ = [
    "Archive",
    "CatalogIntegrityError",
    "CatalogLoader",
    "CatalogValidationError",
    "Checksum",
    "CompletePayload",
    "LicenseRef",
    "MetadataType",
    "RemotePackage",
    "Revision",
    "packages_from_document",
]

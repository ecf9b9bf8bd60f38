# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from android_repo_nix.catalog import (
    Archive,
    Checksum,
    CompletePayload,
    LicenseRef,
    MetadataType,
    RemotePackage,
    Revision,
)

SHA256_VALUE = "9f86d081884c7d659a2feaa0c55ad015a3bf4f1b2b0b822cd15d6c15b0f00a08"
REPOSITORY_URL = "https://dl.google.com/android/repository/repository2-3.xml"

PackageFactory = Callable[..., RemotePackage]


@pytest.fixture
def make_package() -> PackageFactory:
    """Return a factory building remote packages with sensible defaults."""

    def _make(
        path: str = "tools",
        *,
        version: Revision | None = None,
        type_details: MetadataType = MetadataType.GENERIC,
        archives: tuple[Archive, ...] | None = None,
        license: LicenseRef | None = None,
        display_name: str | None = None,
        source_url: str | None = REPOSITORY_URL,
    ) -> RemotePackage:
        return RemotePackage(
            path=path,
            display_name=display_name or f"Package {path}",
            version=version or Revision(major=26, minor=1, micro=1),
            license=license or LicenseRef(id="android-sdk-license", hash="abc123"),
            type_details=type_details,
            archives=archives
            if archives is not None
            else (
                Archive(
                    complete=CompletePayload(
                        url=f"{path.replace(';', '_')}-linux.zip",
                        checksum=Checksum(algorithm="sha256", value=SHA256_VALUE),
                    ),
                    host_os="linux",
                    host_arch="x64",
                ),
            ),
            source_url=source_url,
        )

    return _make


@pytest.fixture
def catalog_document() -> dict[str, Any]:
    """Return a small catalog document in the JSON dump format."""

    return {
        "repositoryUrl": REPOSITORY_URL,
        "packages": {
            "tools": {
                "path": "tools",
                "displayName": "Android SDK Tools",
                "version": {"major": 26, "minor": 1, "micro": 1},
                "license": {"id": "android-sdk-license", "hash": "abc123"},
                "type": "generic:genericDetailsType",
                "archives": [
                    {
                        "hostOs": "linux",
                        "hostArch": "x64",
                        "complete": {
                            "url": "sdk-tools-linux-4333796.zip",
                            "checksum": {"type": "sha256", "value": SHA256_VALUE},
                            "size": 154582459,
                        },
                    },
                ],
            },
            "platforms;android-30": {
                "displayName": "Android SDK Platform 30",
                "version": "3",
                "license": {"id": "android-sdk-license", "hash": "abc123"},
                "type": "sdk:platformDetailsType",
                "archives": [
                    {
                        "complete": {
                            "url": "https://dl.google.com/android/repository/platform-30_r03.zip",
                            "checksum": "67e0edf5b4f7e2cfff5bc3e7a0b0e3c1e9a7f3d1",
                        },
                    },
                ],
            },
        },
    }


@pytest.fixture
def catalog_file(tmp_path: Path, catalog_document: dict[str, Any]) -> Path:
    """Write ``catalog_document`` to disk and return its path."""

    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(catalog_document), encoding="utf-8")
    return path


@pytest.fixture
def sha256_value() -> str:
    """Return the SHA-256 digest used by default package archives."""

    return SHA256_VALUE

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Map archive host tags onto Nix platform tags."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from ..catalog.model_archive import Archive
from .errors import UnknownPlatformError

ALL_PLATFORMS: Final[str] = "all"

HOST_OS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "linux": "linux",
        "macosx": "darwin",
        "windows": "windows",
    },
)
HOST_ARCH: Final[Mapping[str, str]] = MappingProxyType(
    {
        "x86": "i686",
        "x64": "x86_64",
        "aarch64": "aarch64",
    },
)


def _lookup(table: Mapping[str, str], value: str | None, *, kind: str) -> str | None:
    if value is None:
        return None
    try:
        return table[value]
    except KeyError:
        raise UnknownPlatformError(kind, value) from None


def classify_platform(host_os: str | None, host_arch: str | None) -> str:
    """Return the platform tag for a host OS/architecture pair.

    Args:
        host_os: Repository OS tag (``linux``, ``macosx``, ``windows``) or ``None``.
        host_arch: Repository architecture tag (``x86``, ``x64``, ``aarch64``) or ``None``.

    Returns:
        str: ``{arch}-{os}``, ``{os}``, ``{arch}`` or ``all``.

    Raises:
        UnknownPlatformError: If either tag is present but not recognised.
    """

    os_name = _lookup(HOST_OS, host_os, kind="os")
    arch = _lookup(HOST_ARCH, host_arch, kind="arch")
    if os_name is not None:
        return f"{arch}-{os_name}" if arch is not None else os_name
    if arch is not None:
        return arch
    return ALL_PLATFORMS


def platform_tag(archive: Archive) -> str:
    """Return the platform tag for ``archive``."""

    return classify_platform(archive.host_os, archive.host_arch)


__all__ = ["ALL_PLATFORMS", "HOST_ARCH", "HOST_OS", "classify_platform", "platform_tag"]

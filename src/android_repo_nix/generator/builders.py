# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Select the Nix builder function responsible for each package."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Final

from ..catalog.model_package import MetadataType, RemotePackage
from ..catalog.types import PATH_SEPARATOR


class Builder(str, Enum):
    """Builder categories understood by the consuming Nix expressions."""

    BUILD_TOOLS = "BuildTools"
    CMDLINE_TOOLS = "CmdlineTools"
    EMULATOR = "Emulator"
    NDK = "Ndk"
    PLATFORM_TOOLS = "PlatformTools"
    TOOLS = "Tools"
    PREBUILT = "Prebuilt"
    SRC_ONLY = "SrcOnly"

    @property
    def function_name(self) -> str:
        """Return the builder function name, e.g. ``mkBuildTools``."""

        return f"mk{self.value}"


SOURCE_LIKE_TYPES: Final[frozenset[MetadataType]] = frozenset(
    {
        MetadataType.SOURCE,
        MetadataType.PLATFORM,
        MetadataType.EXTRA,
        MetadataType.ADDON,
        MetadataType.MAVEN,
        MetadataType.SYSIMG,
    },
)

BUILDERS_BY_SEGMENT: Final[Mapping[str, Builder]] = MappingProxyType(
    {
        "build-tools": Builder.BUILD_TOOLS,
        "cmdline-tools": Builder.CMDLINE_TOOLS,
        "emulator": Builder.EMULATOR,
        "ndk": Builder.NDK,
        "ndk-bundle": Builder.NDK,
        "platform-tools": Builder.PLATFORM_TOOLS,
        "tools": Builder.TOOLS,
        "cmake": Builder.PREBUILT,
        "skiaparser": Builder.PREBUILT,
    },
)

# Parameters of the generated function; mkNdkBundle is kept for existing callers.
BUILDER_PARAMETERS: Final[tuple[str, ...]] = (
    "mkBuildTools",
    "mkCmdlineTools",
    "mkEmulator",
    "mkNdk",
    "mkNdkBundle",
    "mkPlatformTools",
    "mkPrebuilt",
    "mkTools",
    "mkSrcOnly",
)


def select_builder(type_details: MetadataType, path: str) -> Builder:
    """Return the builder for a package's metadata type and raw path.

    Args:
        type_details: Metadata category of the package.
        path: Raw semicolon-delimited repository path.

    Returns:
        Builder: ``SrcOnly`` for source-like metadata, otherwise the builder
        registered for the first path segment (``SrcOnly`` when none is).
    """

    if type_details in SOURCE_LIKE_TYPES:
        return Builder.SRC_ONLY
    first_segment = path.split(PATH_SEPARATOR, 1)[0]
    return BUILDERS_BY_SEGMENT.get(first_segment, Builder.SRC_ONLY)


def package_builder(package: RemotePackage) -> Builder:
    """Return the builder for ``package``."""

    return select_builder(package.type_details, package.path)


__all__ = [
    "BUILDERS_BY_SEGMENT",
    "BUILDER_PARAMETERS",
    "SOURCE_LIKE_TYPES",
    "Builder",
    "package_builder",
    "select_builder",
]

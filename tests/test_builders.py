# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for builder selection."""

from __future__ import annotations

from android_repo_nix.catalog import MetadataType
from android_repo_nix.generator.builders import BUILDER_PARAMETERS, Builder, package_builder, select_builder


def test_source_like_metadata_always_selects_src_only() -> None:
    for metadata in (
        MetadataType.SOURCE,
        MetadataType.PLATFORM,
        MetadataType.EXTRA,
        MetadataType.ADDON,
        MetadataType.MAVEN,
        MetadataType.SYSIMG,
    ):
        assert select_builder(metadata, "build-tools;30.0.3") is Builder.SRC_ONLY


def test_platform_details_tag_selects_src_only() -> None:
    metadata = MetadataType.from_raw("platform-details")
    assert metadata is MetadataType.PLATFORM
    assert select_builder(metadata, "tools") is Builder.SRC_ONLY


def test_generic_metadata_dispatches_on_first_segment() -> None:
    assert select_builder(MetadataType.GENERIC, "ndk-bundle") is Builder.NDK
    assert select_builder(MetadataType.GENERIC, "ndk;21.4.7075529") is Builder.NDK
    assert select_builder(MetadataType.GENERIC, "build-tools;30.0.3") is Builder.BUILD_TOOLS
    assert select_builder(MetadataType.GENERIC, "cmdline-tools;latest") is Builder.CMDLINE_TOOLS
    assert select_builder(MetadataType.GENERIC, "emulator") is Builder.EMULATOR
    assert select_builder(MetadataType.GENERIC, "platform-tools") is Builder.PLATFORM_TOOLS
    assert select_builder(MetadataType.GENERIC, "tools") is Builder.TOOLS
    assert select_builder(MetadataType.GENERIC, "cmake;3.18.1") is Builder.PREBUILT
    assert select_builder(MetadataType.GENERIC, "skiaparser;1") is Builder.PREBUILT


def test_unknown_first_segment_falls_back_to_src_only() -> None:
    assert select_builder(MetadataType.GENERIC, "unknown-thing;1") is Builder.SRC_ONLY


def test_function_names_are_declared_parameters(make_package) -> None:
    assert Builder.BUILD_TOOLS.function_name == "mkBuildTools"
    assert {builder.function_name for builder in Builder} <= set(BUILDER_PARAMETERS)
    assert package_builder(make_package("emulator")) is Builder.EMULATOR

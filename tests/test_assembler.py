# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for catalog assembly."""

from __future__ import annotations

import os

import pytest

from android_repo_nix.catalog import Archive, Checksum, CompletePayload, LicenseRef, MetadataType, Revision
from android_repo_nix.generator.assembler import assemble, build_package, collect_licenses
from android_repo_nix.generator.builders import Builder
from android_repo_nix.generator.errors import UnknownChecksumError, UnknownPlatformError, UrlResolutionError


def _archive(url: str, *, host_os: str | None = "linux", host_arch: str | None = None, algorithm: str = "sha1") -> Archive:
    return Archive(
        complete=CompletePayload(url=url, checksum=Checksum(algorithm=algorithm, value="00ff")),
        host_os=host_os,
        host_arch=host_arch,
    )


def test_single_tools_package_end_to_end(make_package, sha256_value: str) -> None:
    repository = assemble({"tools": make_package("tools")}, report=lambda _line: None)
    text = repository.render()

    (package,) = repository.packages
    assert package.key == "tools"
    assert package.builder is Builder.TOOLS
    assert [source.platform for source in package.sources] == ["x86_64-linux"]
    assert "  tools = mkTools {\n" in text
    assert "      x86_64-linux = {\n" in text
    assert f'        sha256 = "{sha256_value}";\n' in text


def test_packages_are_ordered_by_raw_path(make_package) -> None:
    paths = ["tools", "build-tools;30.0.3", "extras;google;usb_driver", "build-tools;29.0.2", "platforms;android-30"]
    forward = assemble({path: make_package(path) for path in paths}, report=lambda _line: None)
    backward = assemble({path: make_package(path) for path in reversed(paths)}, report=lambda _line: None)

    assert [package.id for package in forward.packages] == sorted(paths)
    assert forward.render() == backward.render()


def test_packages_are_ordered_by_raw_path_not_derived_key(make_package) -> None:
    # ";" sorts after "-" so the raw and derived orders differ.
    repository = assemble(
        {"a": make_package("ndk;1"), "b": make_package("ndk-bundle")},
        report=lambda _line: None,
    )
    assert [package.id for package in repository.packages] == ["ndk-bundle", "ndk;1"]


def test_licenses_are_deduplicated_and_sorted(make_package) -> None:
    packages = {
        "tools": make_package("tools", license=LicenseRef("android-sdk-license", "first")),
        "emulator": make_package("emulator", license=LicenseRef("android-sdk-preview-license", "p")),
        "platform-tools": make_package("platform-tools", license=LicenseRef("android-sdk-license", "second")),
    }
    repository = assemble(packages, report=lambda _line: None)

    assert [license.id for license in repository.licenses] == ["android-sdk-license", "android-sdk-preview-license"]
    # First seen in raw-path order: "platform-tools" sorts before "tools".
    assert repository.licenses[0].hash == "second"


def test_collect_licenses_keeps_first_occurrence() -> None:
    licenses = collect_licenses([LicenseRef("b", "1"), LicenseRef("a", "2"), LicenseRef("b", "3")])
    assert [(license.id, license.hash) for license in licenses] == [("a", "2"), ("b", "1")]


def test_package_fields_are_derived_from_path(make_package) -> None:
    package = build_package(
        make_package(
            "extras;google;usb_driver",
            version=Revision(major=13),
            type_details=MetadataType.EXTRA,
            archives=(_archive("usb_driver_r13-windows.zip", host_os="windows"),),
        ),
        report=lambda _line: None,
    )
    assert package.path == ("extras", "google", "usb-driver")
    assert package.key == "extras-google-usb-driver"
    assert package.pname == "extras-google-usb-driver"
    assert package.version == "13"
    assert package.builder is Builder.SRC_ONLY
    assert package.package_dir == os.sep.join(["extras", "google", "usb_driver"])
    assert package.sources[0].platform == "windows"
    assert package.sources[0].url == "https://dl.google.com/android/repository/usb_driver_r13-windows.zip"


def test_one_source_per_archive(make_package) -> None:
    package = build_package(
        make_package(
            "platform-tools",
            archives=(
                _archive("pt-linux.zip", host_os="linux"),
                _archive("pt-darwin.zip", host_os="macosx"),
                _archive("pt-windows.zip", host_os="windows"),
            ),
        ),
        report=lambda _line: None,
    )
    assert [source.platform for source in package.sources] == ["linux", "darwin", "windows"]


def test_package_without_archives_keeps_blank_sources_body(make_package) -> None:
    package = build_package(make_package("tools", archives=()), report=lambda _line: None)
    assert package.sources == ()
    assert "  sources = {\n\n  };\n" in package.render()


def test_diagnostic_line_per_archive(make_package) -> None:
    lines: list[str] = []
    assemble(
        {
            "build-tools;30.0.3": make_package(
                "build-tools;30.0.3",
                version=Revision(major=30, micro=3),
                archives=(_archive("bt-linux.zip"), _archive("https://mirror.example.com/bt-mac.zip", host_os="macosx")),
            ),
        },
        report=lines.append,
    )
    assert lines == [
        "build-tools;30.0.3-30.0.3: https://dl.google.com/android/repository/bt-linux.zip",
        "build-tools;30.0.3-30.0.3: https://mirror.example.com/bt-mac.zip",
    ]


def test_preview_versions_use_hyphenated_short_form(make_package) -> None:
    package = build_package(
        make_package("build-tools;31.0.0-rc1", version=Revision(major=31, preview=1)),
        report=lambda _line: None,
    )
    assert package.version == "31-rc1"


def test_custom_resolver_is_used(make_package) -> None:
    calls: list[tuple[str, str]] = []

    def resolver(download_ref: str, package) -> str:
        calls.append((download_ref, package.path))
        return f"https://cache.example.org/{download_ref}"

    repository = assemble({"tools": make_package("tools")}, resolver=resolver, report=lambda _line: None)
    assert calls == [("tools-linux.zip", "tools")]
    assert repository.packages[0].sources[0].url == "https://cache.example.org/tools-linux.zip"


def test_resolver_failure_propagates_unchanged(make_package) -> None:
    class Boom(Exception):
        pass

    def resolver(download_ref: str, package) -> str:
        raise Boom(download_ref)

    with pytest.raises(Boom):
        assemble({"tools": make_package("tools")}, resolver=resolver, report=lambda _line: None)


def test_relative_url_without_base_is_fatal(make_package) -> None:
    with pytest.raises(UrlResolutionError):
        assemble({"tools": make_package("tools", source_url=None)}, report=lambda _line: None)


def test_unknown_platform_aborts_generation(make_package) -> None:
    packages = {
        "tools": make_package("tools"),
        "emulator": make_package("emulator", archives=(_archive("e.zip", host_os="solaris"),)),
    }
    with pytest.raises(UnknownPlatformError):
        assemble(packages, report=lambda _line: None)


def test_unknown_checksum_aborts_generation(make_package) -> None:
    packages = {"tools": make_package("tools", archives=(_archive("t.zip", algorithm="md5"),))}
    with pytest.raises(UnknownChecksumError):
        assemble(packages, report=lambda _line: None)


def test_non_remote_entries_are_skipped(make_package) -> None:
    repository = assemble({"tools": make_package("tools"), "local": object()}, report=lambda _line: None)
    assert [package.id for package in repository.packages] == ["tools"]


def test_default_report_logs_diagnostics(make_package, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level("INFO", logger="android_repo_nix.generator.assembler"):
        assemble({"tools": make_package("tools")})
    assert "tools-26.1.1: https://dl.google.com/android/repository/tools-linux.zip" in caplog.text

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for attribute path derivation."""

from __future__ import annotations

from android_repo_nix.generator.attrpath import attr_name, attrpath


def test_numeric_suffix_merges_into_parent() -> None:
    assert attrpath("build-tools;30.0.3") == ("build-tools-30-0-3",)


def test_category_paths_stay_nested() -> None:
    assert attrpath("extras;google;usb_driver") == ("extras", "google", "usb-driver")


def test_non_numeric_suffix_is_not_merged() -> None:
    assert attrpath("platforms;android-30") == ("platforms", "android-30")


def test_latest_suffix_merges() -> None:
    assert attrpath("cmdline-tools;latest") == ("cmdline-tools-latest",)


def test_suffixes_merge_into_nested_parent() -> None:
    assert attrpath("system-images;android-30;google_apis;x86_64") == (
        "system-images",
        "android-30",
        "google-apis",
        "x86-64",
    )
    assert attrpath("ndk;21.4.7075529") == ("ndk-21-4-7075529",)
    assert attrpath("extras;m2repository;1;2") == ("extras", "m2repository-1-2")


def test_leading_numeric_segment_is_never_merged() -> None:
    assert attrpath("30;tools") == ("30", "tools")


def test_single_segment_path() -> None:
    assert attrpath("tools") == ("tools",)
    assert attr_name(attrpath("extras;google;usb_driver")) == "extras-google-usb-driver"

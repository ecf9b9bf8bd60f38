# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for checksum normalisation."""

from __future__ import annotations

import pytest

from android_repo_nix.catalog import Checksum
from android_repo_nix.generator.checksum import format_checksum, normalize_algorithm
from android_repo_nix.generator.errors import UnknownChecksumError


def test_algorithm_spellings_are_normalised() -> None:
    assert normalize_algorithm("sha1") == "sha1"
    assert normalize_algorithm("sha-1") == "sha1"
    assert normalize_algorithm("sha-256") == "sha256"
    assert normalize_algorithm("sha512") == "sha512"


def test_format_checksum_renders_attribute() -> None:
    checksum = format_checksum(Checksum(algorithm="sha-256", value="deadbeef"))
    assert checksum.algorithm == "sha256"
    assert checksum.render() == 'sha256 = "deadbeef"'


def test_unknown_algorithm_is_fatal() -> None:
    with pytest.raises(UnknownChecksumError, match="md5"):
        format_checksum(Checksum(algorithm="md5", value="00"))


@pytest.mark.parametrize("algorithm", ["SHA-256", "SHA1", "Sha512"])
def test_algorithm_lookup_is_case_sensitive(algorithm: str) -> None:
    with pytest.raises(UnknownChecksumError, match=algorithm):
        format_checksum(Checksum(algorithm=algorithm, value="00"))

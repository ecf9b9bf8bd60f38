# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Generate Nix expressions from Android SDK repository catalogs."""

from __future__ import annotations

from .document.model import License, Package, Repository, Source
from .generator.assembler import assemble

__all__ = ["License", "Package", "Repository", "Source", "assemble"]
__version__ = "0.1.0"

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and sources."""

from __future__ import annotations

from .loaders import ConfigLoadResult, OverrideConfigSource, default_sources, load_config
from .models import ConfigError, GeneratorConfig

__all__ = [
    "ConfigError",
    "ConfigLoadResult",
    "GeneratorConfig",
    "OverrideConfigSource",
    "default_sources",
    "load_config",
]

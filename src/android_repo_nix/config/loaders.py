# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Concrete configuration sources (defaults, TOML, pyproject)."""

from __future__ import annotations

import tomllib
from abc import ABC, abstractmethod
from collections.abc import Mapping, MutableMapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Final

from pydantic import ValidationError

from .models import ConfigError, GeneratorConfig

PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "android-repo-nix"
CONFIG_FILENAME: Final[str] = "android-repo-nix.toml"
_PATH_KEYS: Final[tuple[str, ...]] = ("output", "licenses_output")


class ConfigSource(ABC):
    """Source contributing a configuration fragment."""

    name: str

    @abstractmethod
    def load(self) -> Mapping[str, Any]:
        """Return the configuration fragment provided by the source."""

    def describe(self) -> str:
        """Return a human-readable description of the source."""

        return self.name


class DefaultConfigSource(ConfigSource):
    """Return the built-in defaults as a configuration fragment."""

    name = "defaults"

    def load(self) -> Mapping[str, Any]:
        return GeneratorConfig().to_dict()

    def describe(self) -> str:
        return "Built-in defaults"


class TomlConfigSource(ConfigSource):
    """Load configuration data from a TOML document.

    Relative ``output`` paths are anchored at the document's directory.
    """

    def __init__(self, path: Path, *, name: str | None = None, required: bool = False) -> None:
        self._path = path
        self.name = name or str(path)
        self._required = required

    def load(self) -> Mapping[str, Any]:
        if not self._path.exists():
            if self._required:
                raise ConfigError(f"Configuration file {self._path} does not exist")
            return {}
        try:
            with self._path.open("rb") as handle:
                data = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Configuration at {self._path} is not valid TOML: {exc}") from exc
        return self._anchor_paths(self._section(data))

    def _section(self, data: Mapping[str, Any]) -> Mapping[str, Any]:
        return data

    def _anchor_paths(self, data: Mapping[str, Any]) -> dict[str, Any]:
        if not isinstance(data, MutableMapping):
            raise ConfigError(f"Configuration at {self._path} must be a table")
        document = dict(data)
        for key in _PATH_KEYS:
            value = document.get(key)
            if isinstance(value, str):
                candidate = Path(value).expanduser()
                document[key] = candidate if candidate.is_absolute() else self._path.parent / candidate
        return document

    def describe(self) -> str:
        return f"TOML configuration at {self.name}"


class PyProjectConfigSource(TomlConfigSource):
    """Read configuration from ``[tool.android-repo-nix]`` within ``pyproject.toml``."""

    def _section(self, data: Mapping[str, Any]) -> Mapping[str, Any]:
        tool_section = data.get(PYPROJECT_TOOL_KEY)
        if not isinstance(tool_section, Mapping):
            return {}
        section = tool_section.get(PYPROJECT_SECTION_KEY)
        if not isinstance(section, Mapping):
            return {}
        return {key.replace("-", "_"): value for key, value in section.items()}

    def describe(self) -> str:
        return f"pyproject.toml ({self.name})"


@dataclass(slots=True)
class OverrideConfigSource(ConfigSource):
    """Explicit overrides such as CLI options; ``None`` values are ignored."""

    values: Mapping[str, Any] = field(default_factory=dict)
    name: str = "overrides"

    def load(self) -> Mapping[str, Any]:
        return {key: value for key, value in self.values.items() if value is not None}


@dataclass(frozen=True, slots=True)
class ConfigLoadResult:
    """Resolved configuration along with the sources that contributed to it."""

    config: GeneratorConfig
    sources: tuple[str, ...]


def default_sources(root: Path, config_path: Path | None = None) -> list[ConfigSource]:
    """Return the standard source chain for a project rooted at ``root``."""

    sources: list[ConfigSource] = [
        DefaultConfigSource(),
        PyProjectConfigSource(root / "pyproject.toml"),
        TomlConfigSource(root / CONFIG_FILENAME),
    ]
    if config_path is not None:
        sources.append(TomlConfigSource(config_path, required=True))
    return sources


def load_config(sources: Sequence[ConfigSource]) -> ConfigLoadResult:
    """Merge ``sources`` in order (later wins) and validate the result.

    Raises:
        ConfigError: If a source cannot be read or the merged values are invalid.
    """

    merged: dict[str, Any] = {}
    contributed: list[str] = []
    for source in sources:
        fragment = source.load()
        if fragment:
            merged.update(fragment)
            contributed.append(source.describe())
    try:
        config = GeneratorConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
    return ConfigLoadResult(config=config, sources=tuple(contributed))


__all__ = [
    "CONFIG_FILENAME",
    "ConfigLoadResult",
    "ConfigSource",
    "DefaultConfigSource",
    "OverrideConfigSource",
    "PyProjectConfigSource",
    "TomlConfigSource",
    "default_sources",
    "load_config",
]

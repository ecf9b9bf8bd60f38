# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Document model for the generated Nix expression."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Final

from ..catalog.model_package import LicenseRef
from ..generator.attrpath import AttrPath, attr_name
from ..generator.builders import BUILDER_PARAMETERS, Builder
from ..generator.checksum import NixChecksum
from .render import (
    DEFAULT_INDENT,
    Lines,
    attr_set,
    format_lines,
    literal,
    prefixed,
    string_value,
)

DEFAULT_HEADER: Final[str] = "# Generated by android-repo-nix"


class NixExpr(ABC):
    """Entity that renders to a Nix expression."""

    __slots__ = ()

    @abstractmethod
    def lines(self) -> Lines:
        """Return the expression as depth-annotated lines."""

    def render(self, indent: int = DEFAULT_INDENT) -> str:
        """Return the expression text indented by ``indent`` spaces per level."""

        return format_lines(self.lines(), indent)


@dataclass(frozen=True, slots=True)
class Source(NixExpr):
    """Download of one package archive for one platform."""

    platform: str
    url: str
    checksum: NixChecksum

    def lines(self) -> Lines:
        return attr_set(
            [
                ("url", string_value(self.url)),
                (self.checksum.algorithm, string_value(self.checksum.value)),
            ],
        )


@dataclass(frozen=True, slots=True)
class License(NixExpr):
    """License identifier and content hash."""

    id: str
    hash: str

    @classmethod
    def from_ref(cls, ref: LicenseRef) -> License:
        return cls(id=ref.id, hash=ref.hash)

    def lines(self) -> Lines:
        return attr_set([("id", string_value(self.id)), ("hash", string_value(self.hash))])


@dataclass(frozen=True, slots=True)
class Package(NixExpr):
    """Package rendered as a call to its builder function."""

    id: str
    path: AttrPath
    pname: str
    version: str
    builder: Builder
    sources: tuple[Source, ...]
    display_name: str
    package_dir: str
    license: License

    @property
    def key(self) -> str:
        """Return the attribute name of the package in the repository set."""

        return attr_name(self.path)

    def lines(self) -> Lines:
        record = attr_set(
            [
                ("id", string_value(self.id)),
                ("pname", string_value(self.pname)),
                ("version", string_value(self.version)),
                ("sources", attr_set((source.platform, source.lines()) for source in self.sources)),
                ("displayName", string_value(self.display_name)),
                ("path", string_value(self.package_dir)),
                ("license", self.license.lines()),
                ("xml", literal(f"./{self.pname}.xml")),
            ],
        )
        return prefixed(f"{self.builder.function_name} ", record)


@dataclass(frozen=True, slots=True)
class Repository(NixExpr):
    """Complete generated document: a function from builders to the package set."""

    packages: tuple[Package, ...]
    licenses: tuple[License, ...]
    header: str = DEFAULT_HEADER

    def lines(self) -> Lines:
        first, *others = BUILDER_PARAMETERS
        signature = ((0, f"{{ {first}"), *((0, f", {name}") for name in others))
        body = attr_set((package.key, package.lines()) for package in self.packages)
        return ((0, self.header), (0, ""), *signature, *prefixed("}: ", body))

    def license_lines(self) -> Lines:
        """Return the deduplicated licenses as a set keyed by license id."""

        return attr_set((license.id, license.lines()) for license in self.licenses)

    def render_licenses(self, indent: int = DEFAULT_INDENT) -> str:
        """Return the license set text indented by ``indent`` spaces per level."""

        return format_lines(self.license_lines(), indent)


__all__ = ["DEFAULT_HEADER", "License", "NixExpr", "Package", "Repository", "Source"]

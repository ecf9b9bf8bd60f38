# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for the generator."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..document.model import DEFAULT_HEADER
from ..document.render import DEFAULT_INDENT


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class GeneratorConfig(BaseModel):
    """Settings controlling how the Nix expression is generated and written."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    indent: int = Field(default=DEFAULT_INDENT, ge=0, le=16)
    header: str = DEFAULT_HEADER
    base_url: str | None = None
    output: Path | None = None
    licenses_output: Path | None = None

    @field_validator("header")
    @classmethod
    def _require_comment(cls, value: str) -> str:
        """Return ``value`` when every non-blank line is a Nix comment."""

        lines = value.splitlines()
        if not lines or not lines[0].startswith("#"):
            raise ValueError("header must start with a '#' comment line")
        if any(line.strip() and not line.lstrip().startswith("#") for line in lines):
            raise ValueError("header lines must be blank or '#' comments")
        return value

    def to_dict(self) -> dict[str, object]:
        """Return a plain mapping suitable for merging with other sources."""

        return self.model_dump(exclude_none=True)


__all__ = ["ConfigError", "GeneratorConfig"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Resolve archive download references into absolute URLs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol
from urllib.parse import urljoin, urlparse

from ..catalog.model_package import RemotePackage
from .errors import UrlResolutionError


class UrlResolver(Protocol):
    """Callable turning an archive's download reference into a final URL."""

    def __call__(self, download_ref: str, package: RemotePackage) -> str:
        """Return the resolvable URL for ``download_ref`` listed by ``package``."""


def is_absolute_url(value: str) -> bool:
    """Return ``True`` when ``value`` carries a scheme and a network location."""

    parsed = urlparse(value)
    return bool(parsed.scheme and parsed.netloc)


@dataclass(frozen=True, slots=True)
class RepositoryUrlResolver:
    """Resolve relative references against the manifest that listed the package.

    Attributes:
        base_url: Fallback base used when a package carries no ``source_url``.
    """

    base_url: str | None = None

    def __call__(self, download_ref: str, package: RemotePackage) -> str:
        """Return ``download_ref`` as an absolute URL.

        Args:
            download_ref: Archive URL as declared in the repository manifest.
            package: Package whose manifest anchors relative references.

        Returns:
            str: Absolute download URL.

        Raises:
            UrlResolutionError: If the reference is relative and no base URL is known.
        """

        if is_absolute_url(download_ref):
            return download_ref
        base = package.source_url or self.base_url
        if not base:
            raise UrlResolutionError(f"{package.path}: cannot resolve relative URL '{download_ref}' without a base URL")
        resolved = urljoin(base, download_ref)
        if not is_absolute_url(resolved):
            raise UrlResolutionError(f"{package.path}: '{download_ref}' resolved to non-absolute URL '{resolved}'")
        return resolved


resolve_url: UrlResolver = RepositoryUrlResolver()

__all__ = ["RepositoryUrlResolver", "UrlResolver", "is_absolute_url", "resolve_url"]

"""langbundle exception hierarchy.

Only load-time operations raise. The translation path is total: a missing
message is handled by the bundle's miss policy and never surfaces as an
exception.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

__all__ = [
    "CatalogDecodeError",
    "CatalogLoadError",
    "CatalogReadError",
    "LangBundleError",
    "UnsupportedFormatError",
]


class LangBundleError(Exception):
    """Base exception for all langbundle errors."""


class CatalogLoadError(LangBundleError):
    """A catalog source could not be loaded.

    Loading stops at the first failing source. Directory and resource-tree
    loads do not continue with the remaining files.

    Attributes:
        source: Path or description of the failing source
        language: Language the source was being loaded for, if known
    """

    def __init__(
        self,
        message: str,
        *,
        source: str | None = None,
        language: str | None = None,
    ) -> None:
        """Initialize CatalogLoadError.

        Args:
            message: Human-readable error message
            source: Path or description of the failing source
            language: Target language of the load, if known
        """
        super().__init__(message)
        self.source = source
        self.language = language


class CatalogReadError(CatalogLoadError):
    """Source could not be read (missing directory, permission denied, ...)."""


class CatalogDecodeError(CatalogLoadError):
    """Source bytes are malformed for the declared format.

    Also raised when the decoded top level is not a mapping, since a catalog
    document must map identifiers (or namespaces) to messages.
    """


class UnsupportedFormatError(LangBundleError, ValueError):
    """Declared catalog format is not one of json, yaml, yml, toml.

    Subclasses ValueError so callers validating user input can catch either.
    """

    def __init__(self, format_name: str) -> None:
        """Initialize UnsupportedFormatError.

        Args:
            format_name: The rejected format name as supplied by the caller
        """
        super().__init__(f"Unsupported catalog format: {format_name!r}")
        self.format_name = format_name

"""Error types for langbundle.

Python 3.13+. Zero external dependencies.
"""

from .errors import (
    CatalogDecodeError,
    CatalogLoadError,
    CatalogReadError,
    LangBundleError,
    UnsupportedFormatError,
)

__all__ = [
    "CatalogDecodeError",
    "CatalogLoadError",
    "CatalogReadError",
    "LangBundleError",
    "UnsupportedFormatError",
]

"""Built-in language packs shipped as package data.

Common UI strings (confirm, cancel, save, ...) in English, Simplified
Chinese and Japanese, stored as JSON files next to this module. The
process-wide default bundle loads them on creation unless the
LANGBUNDLE_NO_BUILTIN environment variable is set to a non-empty value.

Python 3.13+.
"""

from __future__ import annotations

import os
from importlib.resources import files
from typing import TYPE_CHECKING

from langbundle.constants import NO_BUILTIN_ENV_VAR

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

    from langbundle.catalog.loading import LoadedFile
    from langbundle.runtime.bundle import Bundle

__all__ = ["builtin_disabled", "builtin_files", "use_builtin"]


def builtin_files() -> Traversable:
    """Resource tree holding the built-in packs."""
    return files(__name__)


def builtin_disabled() -> bool:
    """True when LANGBUNDLE_NO_BUILTIN is set to a non-empty value."""
    return bool(os.environ.get(NO_BUILTIN_ENV_VAR))


def use_builtin(bundle: Bundle | None = None) -> tuple[LoadedFile, ...]:
    """Load the built-in packs into a bundle.

    Loading again is harmless: definitions are replaced, not duplicated.
    The environment switch only governs automatic loading; an explicit call
    always loads.

    Args:
        bundle: Target bundle (default: the process-wide default bundle)

    Raises:
        CatalogLoadError: If a pack cannot be read or decoded
    """
    if bundle is None:
        from langbundle.default import default  # noqa: PLC0415 - circular

        bundle = default()
    return bundle.load_resources(builtin_files())

"""Process-wide default Bundle and module-level shortcuts.

Applications that need a single set of translations can skip creating a
Bundle and call the functions here, which all delegate to default().

The default bundle is created on first use, exactly once, with
BundleConfig() and the built-in packs loaded (unless LANGBUNDLE_NO_BUILTIN is
set). init() replaces it with a bundle built from a custom configuration.

Example:
    >>> import langbundle
    >>> langbundle.init(langbundle.BundleConfig(default_lang="zh-CN"))
    >>> langbundle.t("confirm")
    '确认'

Python 3.13+.
"""

from __future__ import annotations

import logging
import os
import threading
from decimal import Decimal
from typing import TYPE_CHECKING

from langbundle.builtin import builtin_disabled, use_builtin
from langbundle.diagnostics import CatalogLoadError
from langbundle.runtime.bundle import Bundle

if TYPE_CHECKING:
    import contextvars
    from collections.abc import Mapping
    from importlib.resources.abc import Traversable

    from langbundle.catalog.loading import LoadedFile
    from langbundle.catalog.types import LanguageTag, MessageId
    from langbundle.enums import CatalogFormat
    from langbundle.runtime.config import BundleConfig
    from langbundle.runtime.options import TemplateDataInput, TranslateOptions

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Instance management
    "default",
    "init",
    # Translation
    "t",
    "translate",
    # Language settings
    "set_lang",
    "get_lang",
    "languages",
    "set_default_lang",
    "set_fallback_lang",
    # Loading
    "load",
    "load_resources",
    "load_content",
    "load_messages",
]

logger = logging.getLogger(__name__)

_default_lock = threading.Lock()
_default_bundle: Bundle | None = None


def _create(config: BundleConfig | None) -> Bundle:
    bundle = Bundle(config)
    if builtin_disabled():
        logger.info("Built-in language packs disabled by environment")
        return bundle
    try:
        use_builtin(bundle)
    except CatalogLoadError as e:
        # Packaging problem; the bundle stays usable without the packs
        logger.warning("Failed to load built-in language packs: %s", e)
    return bundle


def default() -> Bundle:
    """Get the process-wide default bundle, creating it on first use."""
    global _default_bundle  # noqa: PLW0603 - process-wide singleton
    bundle = _default_bundle
    if bundle is not None:
        return bundle
    with _default_lock:
        if _default_bundle is None:
            _default_bundle = _create(None)
            logger.info("Default bundle created")
        return _default_bundle


def init(config: BundleConfig | None = None) -> Bundle:
    """Replace the default bundle with a new one built from ``config``.

    Bundles previously obtained from default() keep working but are no
    longer the default.

    Returns:
        The new default bundle
    """
    global _default_bundle  # noqa: PLW0603 - process-wide singleton
    bundle = _create(config)
    with _default_lock:
        _default_bundle = bundle
    logger.info("Default bundle replaced")
    return bundle


def translate(
    message_id: MessageId,
    options: TranslateOptions | None = None,
    /,
    *,
    lang: str | None = None,
    data: TemplateDataInput | None = None,
    count: int | float | Decimal | None = None,
    context: contextvars.Context | None = None,
) -> str:
    """Translate with the default bundle. See Bundle.translate()."""
    return default().translate(
        message_id, options, lang=lang, data=data, count=count, context=context
    )


t = translate


def set_lang(lang: str) -> None:
    """Set the default bundle's current language."""
    default().set_lang(lang)


def get_lang() -> str:
    """Get the default bundle's current language."""
    return default().get_lang()


def languages() -> list[LanguageTag]:
    """Languages loaded into the default bundle."""
    return default().languages()


def set_default_lang(lang: str) -> None:
    """Set the default bundle's default language."""
    default().set_default_lang(lang)


def set_fallback_lang(lang: str) -> None:
    """Set the default bundle's fallback language."""
    default().set_fallback_lang(lang)


def load(directory: str | os.PathLike[str]) -> tuple[LoadedFile, ...]:
    """Load a catalog directory into the default bundle."""
    return default().load(directory)


def load_resources(tree: Traversable, root: str = "") -> tuple[LoadedFile, ...]:
    """Load a resource tree into the default bundle."""
    return default().load_resources(tree, root)


def load_content(lang: str, fmt: str | CatalogFormat, data: bytes | str) -> LoadedFile:
    """Load one catalog document into the default bundle."""
    return default().load_content(lang, fmt, data)


def load_messages(lang: str, messages: Mapping[str, object]) -> None:
    """Load flat messages into the default bundle."""
    default().load_messages(lang, messages)

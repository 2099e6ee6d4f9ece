"""langbundle - message lookup and translation for Python applications.

Resolves a message identifier, a target language, optional template data and
an optional plural count to a rendered string in the best available
language, falling back to a configured fallback language and applying a
miss policy when no translation exists.

Catalogs are JSON, YAML or TOML documents with nested namespaces and plural
message objects, loaded from directories, package resources or memory.

Public API:
    Bundle - Catalog plus language settings; translate() / t()
    BundleConfig - Construction-time settings for Bundle
    TranslateOptions - Per-call options object
    t, translate, load, ... - Shortcuts on the process-wide default bundle
    context_with_lang, language_scope - Request-scoped language binding
    detect_language - Pick a request's language from query, cookie, header

Exceptions:
    LangBundleError - Base exception class
    CatalogLoadError - Catalog could not be read or decoded
    UnsupportedFormatError - Unknown catalog format

Submodules:
    langbundle.catalog - Message definitions, catalog, decoding, ingest
    langbundle.runtime - Bundle, resolvers, cache, templates, context
    langbundle.compat - Deprecated short-name aliases
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from .builtin import use_builtin
from .catalog import LoadedFile, MessageCatalog, MessageDefinition
from .default import (
    default,
    get_lang,
    init,
    languages,
    load,
    load_content,
    load_messages,
    load_resources,
    set_default_lang,
    set_fallback_lang,
    set_lang,
    t,
    translate,
)
from .diagnostics import (
    CatalogDecodeError,
    CatalogLoadError,
    CatalogReadError,
    LangBundleError,
    UnsupportedFormatError,
)
from .enums import CatalogFormat, LangSource, MissPolicy, PluralCategory
from .locale_utils import normalize_language_tag, parse_language_tag
from .negotiation import DetectorConfig, detect_language, parse_accept_language
from .runtime import (
    Bundle,
    BundleConfig,
    TranslateOptions,
    context_with_lang,
    lang_from_context,
    language_scope,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("langbundle")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    # Core
    "Bundle",
    "BundleConfig",
    "TranslateOptions",
    "MessageCatalog",
    "MessageDefinition",
    "LoadedFile",
    # Enums
    "CatalogFormat",
    "LangSource",
    "MissPolicy",
    "PluralCategory",
    # Default bundle
    "default",
    "init",
    "t",
    "translate",
    "set_lang",
    "get_lang",
    "languages",
    "set_default_lang",
    "set_fallback_lang",
    "load",
    "load_resources",
    "load_content",
    "load_messages",
    "use_builtin",
    # Language tags and request context
    "normalize_language_tag",
    "parse_language_tag",
    "context_with_lang",
    "lang_from_context",
    "language_scope",
    "DetectorConfig",
    "detect_language",
    "parse_accept_language",
    # Exceptions
    "LangBundleError",
    "CatalogLoadError",
    "CatalogReadError",
    "CatalogDecodeError",
    "UnsupportedFormatError",
    "__version__",
]

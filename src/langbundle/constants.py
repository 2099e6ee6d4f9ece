"""Shared constants for langbundle.

Single source of truth for values shared between the catalog and runtime
packages. Placing them here avoids circular imports.

Constants are grouped by domain:
- Language defaults: tag used when nothing else is configured
- Message shape: reserved keys recognised during ingest
- Template data: keys injected by the engine
- File loading: extensions accepted by directory loaders
- Cache limits: memory bounds for the resolver cache

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Language defaults
    "DEFAULT_LANGUAGE",
    # Message shape
    "PLURAL_KEYS",
    "METADATA_KEYS",
    "RESERVED_MESSAGE_KEYS",
    "NAMESPACE_SEPARATOR",
    # Template data
    "COUNT_KEY",
    # File loading
    "SUPPORTED_EXTENSIONS",
    "NO_BUILTIN_ENV_VAR",
    # Cache limits
    "MAX_RESOLVER_CACHE_SIZE",
    # Logging
    "LOG_TRUNCATE",
]

# ============================================================================
# LANGUAGE DEFAULTS
# ============================================================================

# Last-resort tag when neither the requested nor the configured default
# language parses.
DEFAULT_LANGUAGE: str = "en"

# ============================================================================
# MESSAGE SHAPE
# ============================================================================

# Plural category keys, in CLDR order.
PLURAL_KEYS: tuple[str, ...] = ("zero", "one", "two", "few", "many", "other")

# Descriptive keys carried by a message object. Inert at translation time.
METADATA_KEYS: tuple[str, ...] = ("description", "hash")

# A nested mapping IS a message definition iff it holds at least one of these.
# Any other mapping is a namespace. A namespace that happens to contain a child
# literally named "other" or "hash" is therefore read as a message object.
RESERVED_MESSAGE_KEYS: frozenset[str] = frozenset(PLURAL_KEYS + METADATA_KEYS)

# Joins nesting levels into a message identifier: {"a": {"b": ...}} -> "a.b"
NAMESPACE_SEPARATOR: str = "."

# ============================================================================
# TEMPLATE DATA
# ============================================================================

# Plural count is exposed to templates under this key ({{.Count}}).
COUNT_KEY: str = "Count"

# ============================================================================
# FILE LOADING
# ============================================================================

# Lower-case file extensions picked up by directory and resource-tree loaders.
SUPPORTED_EXTENSIONS: frozenset[str] = frozenset({".json", ".yaml", ".yml", ".toml"})

# When set to a non-empty value, the process-wide default bundle starts empty
# instead of loading the built-in language packs.
NO_BUILTIN_ENV_VAR: str = "LANGBUNDLE_NO_BUILTIN"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached per-language resolvers per bundle.
# 128 covers typical multi-region applications (major languages + regional variants).
MAX_RESOLVER_CACHE_SIZE: int = 128

# ============================================================================
# LOGGING
# ============================================================================

# Untrusted text (message ids, file content) is truncated to this many
# characters before it reaches a log record.
LOG_TRUNCATE: int = 100

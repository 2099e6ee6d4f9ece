"""Language tag utilities.

Centralizes language tag normalization used throughout the codebase.
Provides canonical tag handling to ensure consistent catalog keys, cache keys
and lookups.

Two layers:
    normalize_language_tag - separator normalization only ("zh_CN" -> "zh-CN")
    parse_language_tag     - grammar validation + canonical casing via Babel

The parser never substitutes a default. Substitution on parse failure is a
policy decision of the catalog/engine layer and lives in resolve_language_tag.

Python 3.13+. External dependency: Babel (locale identifier grammar).
"""

from __future__ import annotations

import functools
import logging
from pathlib import PurePath

from babel.core import get_locale_identifier, parse_locale

from langbundle.constants import DEFAULT_LANGUAGE, LOG_TRUNCATE

__all__ = [
    "language_from_filename",
    "normalize_language_tag",
    "parse_language_tag",
    "resolve_language_tag",
]

logger = logging.getLogger(__name__)


def normalize_language_tag(value: str) -> str:
    """Replace every underscore separator with a hyphen.

    Casing is left untouched and no validation happens here. The function is
    total and idempotent.

    Args:
        value: Language string as supplied by a caller ("zh_CN", "pt-BR", ...)

    Returns:
        The same string with "_" replaced by "-"

    Example:
        >>> normalize_language_tag("zh_CN")
        'zh-CN'
        >>> normalize_language_tag("zh-CN")
        'zh-CN'
    """
    return value.replace("_", "-")


@functools.lru_cache(maxsize=256)
def parse_language_tag(value: str) -> str | None:
    """Validate a language tag and return its canonical form.

    Accepts language, optional script, optional region and optional variant
    (en, zh-Hans, zh-CN, zh-Hans-CN). Canonical casing: language lower,
    script title, region upper.

    Thread-safe via lru_cache internal locking.

    Args:
        value: Language string in either separator style

    Returns:
        Canonical tag, or None when the input does not match the grammar

    Example:
        >>> parse_language_tag("zh_cn")
        'zh-CN'
        >>> parse_language_tag("zh-hans")
        'zh-Hans'
        >>> parse_language_tag("not a tag") is None
        True
    """
    normalized = normalize_language_tag(value)
    if not normalized or not normalized.isascii():
        return None
    try:
        parts = parse_locale(normalized, sep="-")
    except ValueError:
        return None

    language = parts[0]
    if not 2 <= len(language) <= 8:
        return None
    return get_locale_identifier(parts[:4], sep="-")


def resolve_language_tag(value: str, default: str = DEFAULT_LANGUAGE) -> str:
    """Parse a tag, substituting the configured default on failure.

    This is the substitution policy used when keying the catalog and the
    resolver cache. If the default itself does not parse, "en" is used.

    Args:
        value: Requested language
        default: Configured default language

    Returns:
        A canonical language tag (never fails)
    """
    tag = parse_language_tag(value)
    if tag is not None:
        return tag

    substitute = parse_language_tag(default) or DEFAULT_LANGUAGE
    logger.warning(
        "Invalid language tag %s, using %s",
        repr(value[:LOG_TRUNCATE]),
        substitute,
    )
    return substitute


def language_from_filename(filename: str) -> str:
    """Derive the language of a catalog file from its name.

    Strips the extension and normalizes the remainder. For names of the form
    <domain>.<language>.<ext> only the last dotted segment of the stem is
    the language.

    Example:
        >>> language_from_filename("zh_CN.json")
        'zh-CN'
        >>> language_from_filename("messages.pt-BR.yaml")
        'pt-BR'
    """
    stem = PurePath(filename).stem
    return normalize_language_tag(stem.rsplit(".", 1)[-1])

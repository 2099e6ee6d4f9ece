"""Translation runtime package.

Provides the Bundle API, per-language resolvers and their cache, plural
selection, template rendering and language context propagation.
Depends on the catalog package for message storage and decoding.

Python 3.13+.
"""

from .bundle import Bundle
from .cache import ResolverCache
from .config import BundleConfig, MissHandler
from .context import (
    LanguageScope,
    context_with_lang,
    lang_from_context,
    language_in_context,
    language_scope,
)
from .options import TranslateOptions, coerce_template_data
from .plural_rules import select_plural_category
from .resolver import ResolvedMessage, Resolver, build_resolver
from .rwlock import RWLock
from .template import render_template

__all__ = [
    "Bundle",
    "BundleConfig",
    "LanguageScope",
    "MissHandler",
    "RWLock",
    "ResolvedMessage",
    "Resolver",
    "ResolverCache",
    "TranslateOptions",
    "build_resolver",
    "coerce_template_data",
    "context_with_lang",
    "lang_from_context",
    "language_in_context",
    "language_scope",
    "render_template",
    "select_plural_category",
]

"""Request-scoped language propagation via contextvars.

A request handler binds the caller's language once and every translate()
call made while serving the request, in the same thread or asyncio task,
picks it up without passing it explicitly.

Two ways to bind:
    language_scope(lang)         - with-block in the current context
    context_with_lang(lang, ctx) - derived contextvars.Context, for passing
                                   explicitly (TranslateOptions.context) or
                                   running code with ctx.run()

Precedence inside Bundle.translate(): explicit lang > context language >
bundle current language.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from contextvars import Context, ContextVar, Token, copy_context
from typing import TYPE_CHECKING

from langbundle.locale_utils import normalize_language_tag

if TYPE_CHECKING:
    from langbundle.runtime.bundle import Bundle

__all__ = [
    "LanguageScope",
    "context_with_lang",
    "lang_from_context",
    "language_in_context",
    "language_scope",
]

# Per-thread / per-task language. Empty string and None both mean "unset".
_context_language: ContextVar[str | None] = ContextVar("langbundle_language", default=None)


def context_with_lang(lang: str, ctx: Context | None = None) -> Context:
    """Derive a context carrying a language.

    The source context (``ctx`` or, when omitted, the current one) is not
    modified.

    Args:
        lang: Language to bind; stored normalized ("zh_CN" -> "zh-CN")
        ctx: Context to derive from

    Returns:
        A new Context

    Example:
        >>> ctx = context_with_lang("zh_CN")
        >>> language_in_context(ctx)
        'zh-CN'
    """
    derived = ctx.copy() if ctx is not None else copy_context()
    derived.run(_context_language.set, normalize_language_tag(lang))
    return derived


def language_in_context(ctx: Context | None = None) -> str | None:
    """Language bound in a context, or None when nothing is bound.

    Args:
        ctx: Context to inspect (default: the current context)
    """
    value = _context_language.get() if ctx is None else ctx.get(_context_language)
    return value or None


def lang_from_context(ctx: Context | None = None, bundle: Bundle | None = None) -> str:
    """Language bound in a context, else the bundle's current language.

    Args:
        ctx: Context to inspect (default: the current context)
        bundle: Bundle whose current language is the fallback
            (default: the process-wide default bundle)
    """
    value = language_in_context(ctx)
    if value is not None:
        return value
    if bundle is None:
        from langbundle.default import default  # noqa: PLC0415 - circular

        bundle = default()
    return bundle.get_lang()


class LanguageScope:
    """Context manager binding a language in the current context.

    Usage:
        with language_scope(request.headers["Accept-Language"]):
            handle(request)  # translate() calls see the language

    Scopes nest; leaving a scope restores the previous binding.
    """

    __slots__ = ("_language", "_token")

    def __init__(self, lang: str) -> None:
        """Initialize scope for a language (stored normalized)."""
        self._language = normalize_language_tag(lang)
        self._token: Token[str | None] | None = None

    @property
    def language(self) -> str:
        """Normalized language bound by this scope."""
        return self._language

    def __enter__(self) -> LanguageScope:
        """Bind the language."""
        self._token = _context_language.set(self._language)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Restore the previous binding."""
        if self._token is not None:
            _context_language.reset(self._token)
            self._token = None


def language_scope(lang: str) -> LanguageScope:
    """Create a LanguageScope for a with-block."""
    return LanguageScope(lang)

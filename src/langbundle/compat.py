"""Short-name aliases kept for code written against older releases.

Every alias delegates to the process-wide default bundle and emits a
DeprecationWarning naming its replacement. New code should call
langbundle.t() with keyword arguments instead.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from langbundle.default import get_lang, languages, set_lang, translate
from langbundle.deprecation import deprecated

if TYPE_CHECKING:
    import contextvars

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Language settings
    "set_language",
    "get_language",
    "langs",
    "get_languages",
    # Explicit language / data / count
    "tl",
    "tf",
    "tlf",
    "tp",
    "tlp",
    "tmap",
    "tlmap",
    # Context
    "tc",
    "tcf",
    "tcp",
]

_REMOVAL = "1.0.0"


@deprecated(removal_version=_REMOVAL, alternative="set_lang(lang)")
def set_language(lang: str) -> None:
    """Set the current language."""
    set_lang(lang)


@deprecated(removal_version=_REMOVAL, alternative="get_lang()")
def get_language() -> str:
    """Get the current language."""
    return get_lang()


@deprecated(removal_version=_REMOVAL, alternative="languages()")
def langs() -> list[str]:
    """Loaded languages."""
    return languages()


@deprecated(removal_version=_REMOVAL, alternative="languages()")
def get_languages() -> list[str]:
    """Loaded languages."""
    return languages()


@deprecated(removal_version=_REMOVAL, alternative="t(id, lang=lang)")
def tl(lang: str, message_id: str) -> str:
    """Translate into an explicit language."""
    return translate(message_id, lang=lang)


@deprecated(removal_version=_REMOVAL, alternative="t(id, data=[...])")
def tf(message_id: str, *args: object) -> str:
    """Translate with key/value pairs."""
    return translate(message_id, data=args)


@deprecated(removal_version=_REMOVAL, alternative="t(id, lang=lang, data=[...])")
def tlf(lang: str, message_id: str, *args: object) -> str:
    """Translate into an explicit language with key/value pairs."""
    return translate(message_id, lang=lang, data=args)


@deprecated(removal_version=_REMOVAL, alternative="t(id, count=count)")
def tp(message_id: str, count: int, *args: object) -> str:
    """Translate a plural message."""
    return translate(message_id, count=count, data=args)


@deprecated(removal_version=_REMOVAL, alternative="t(id, lang=lang, count=count)")
def tlp(lang: str, message_id: str, count: int, *args: object) -> str:
    """Translate a plural message into an explicit language."""
    return translate(message_id, lang=lang, count=count, data=args)


@deprecated(removal_version=_REMOVAL, alternative="t(id, data=mapping)")
def tmap(message_id: str, data: Mapping[str, object]) -> str:
    """Translate with a data mapping."""
    return translate(message_id, data=data)


@deprecated(removal_version=_REMOVAL, alternative="t(id, lang=lang, data=mapping)")
def tlmap(lang: str, message_id: str, data: Mapping[str, object]) -> str:
    """Translate into an explicit language with a data mapping."""
    return translate(message_id, lang=lang, data=data)


@deprecated(removal_version=_REMOVAL, alternative="t(id, context=ctx)")
def tc(ctx: contextvars.Context, message_id: str) -> str:
    """Translate in the language bound to a context."""
    return translate(message_id, context=ctx)


@deprecated(removal_version=_REMOVAL, alternative="t(id, context=ctx, data=[...])")
def tcf(ctx: contextvars.Context, message_id: str, *args: object) -> str:
    """Translate in a context's language with key/value pairs."""
    return translate(message_id, context=ctx, data=args)


@deprecated(removal_version=_REMOVAL, alternative="t(id, context=ctx, count=count)")
def tcp(ctx: contextvars.Context, message_id: str, count: int, *args: object) -> str:
    """Translate a plural message in a context's language."""
    return translate(message_id, context=ctx, count=count, data=args)

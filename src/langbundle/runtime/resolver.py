"""Per-language message resolution with single-language fallback.

A Resolver is a read-only view over two per-language snapshots taken from the
catalog: the requested language and the configured fallback language. It
answers "which text does message X have for count N", trying the requested
language first and the fallback second. Template rendering and miss handling
are the Bundle's job.

Only one fallback language is consulted. There is no chain such as
zh-Hant-TW -> zh-Hant -> zh -> en.

Thread Safety:
    Immutable after construction. Safe to share between threads.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType
from typing import TYPE_CHECKING

from langbundle.enums import PluralCategory
from langbundle.runtime.plural_rules import select_plural_category

if TYPE_CHECKING:
    from langbundle.catalog.catalog import MessageCatalog
    from langbundle.catalog.message import MessageDefinition
    from langbundle.catalog.types import LanguageTag, MessageId

__all__ = ["ResolvedMessage", "Resolver", "build_resolver"]

logger = logging.getLogger(__name__)

_EMPTY: Mapping[str, MessageDefinition] = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class ResolvedMessage:
    """Text found for a message, before template rendering.

    Attributes:
        text: Raw message text (placeholders not yet substituted)
        language: Canonical tag of the language that answered
        category: Plural category whose form was used (OTHER for plain messages)
    """

    text: str
    language: LanguageTag
    category: PluralCategory


class Resolver:
    """Message lookup for one requested language plus one fallback language.

    Example:
        >>> from langbundle.catalog import MessageCatalog, MessageDefinition
        >>> catalog = MessageCatalog()
        >>> catalog.add_messages("en", {"hello": MessageDefinition.plain("hello", "Hello")})
        >>> resolver = build_resolver(catalog, "ja", "en")
        >>> resolver.get("hello")
        ResolvedMessage(text='Hello', language='en', category=<PluralCategory.OTHER: 'other'>)
        >>> resolver.get("nope") is None
        True
    """

    __slots__ = ("_fallback", "_fallback_messages", "_language", "_messages")

    def __init__(
        self,
        language: LanguageTag,
        messages: Mapping[MessageId, MessageDefinition] | None,
        fallback: LanguageTag,
        fallback_messages: Mapping[MessageId, MessageDefinition] | None,
    ) -> None:
        """Initialize resolver from catalog snapshots.

        Args:
            language: Canonical requested language
            messages: Definitions of the requested language (None if unknown)
            fallback: Canonical fallback language
            fallback_messages: Definitions of the fallback language (None if unknown)
        """
        self._language = language
        self._messages = messages if messages is not None else _EMPTY
        self._fallback = fallback
        # Requested == fallback: a second lookup would find nothing new
        self._fallback_messages = (
            _EMPTY
            if fallback == language or fallback_messages is None
            else fallback_messages
        )

    @property
    def language(self) -> LanguageTag:
        """Canonical requested language."""
        return self._language

    @property
    def fallback(self) -> LanguageTag:
        """Canonical fallback language."""
        return self._fallback

    def get(
        self,
        message_id: MessageId,
        count: int | float | Decimal | None = None,
    ) -> ResolvedMessage | None:
        """Resolve a message for a count.

        Plain messages ignore ``count``. Plural messages select ``one`` or
        ``other`` from the count; a missing category falls back to ``other``
        and a message without ``other`` counts as absent in that language.

        Returns:
            The resolved text, or None if neither language has it
        """
        category = select_plural_category(count)
        found = _pick(self._messages.get(message_id), category, self._language)
        if found is None:
            found = _pick(self._fallback_messages.get(message_id), category, self._fallback)
        return found

    def has_message(self, message_id: MessageId) -> bool:
        """Check whether either language defines the message."""
        return message_id in self._messages or message_id in self._fallback_messages

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"Resolver(language={self._language!r}, fallback={self._fallback!r}, "
            f"messages={len(self._messages)}, fallback_messages={len(self._fallback_messages)})"
        )


def _pick(
    definition: MessageDefinition | None,
    category: PluralCategory,
    language: LanguageTag,
) -> ResolvedMessage | None:
    if definition is None:
        return None
    if not definition.plural:
        text = definition.text()
        if text is None:
            return None
        return ResolvedMessage(text, language, PluralCategory.OTHER)

    text = definition.forms.get(category)
    if text is not None:
        return ResolvedMessage(text, language, category)
    text = definition.forms.get(PluralCategory.OTHER)
    if text is not None:
        return ResolvedMessage(text, language, PluralCategory.OTHER)
    return None


def build_resolver(
    catalog: MessageCatalog,
    requested: LanguageTag,
    fallback: LanguageTag,
) -> Resolver:
    """Build a resolver from the catalog's current per-language snapshots.

    Args:
        catalog: Source catalog (caller holds the Bundle read lock)
        requested: Canonical requested language
        fallback: Canonical fallback language

    Returns:
        A resolver that keeps answering from the snapshots even if the
        catalog is reloaded later
    """
    resolver = Resolver(
        requested,
        catalog.messages_for(requested),
        fallback,
        catalog.messages_for(fallback),
    )
    logger.debug("Built %r", resolver)
    return resolver

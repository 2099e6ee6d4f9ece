"""Message catalog keyed by language tag and message identifier.

The catalog stores exactly what was loaded: lookups are exact-match only and
fallback between languages is the resolver's job.

Per-language maps are replaced copy-on-write on every add, so a map handed out
by messages_for() is never mutated afterwards. Resolvers built from such a map
stay internally consistent; the owning Bundle discards them on every load.

Thread Safety:
    Not synchronized. The owning Bundle serializes writers against readers
    with its RWLock.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from langbundle.catalog.message import MessageDefinition
from langbundle.catalog.types import LanguageTag, MessageId

__all__ = ["MessageCatalog"]

logger = logging.getLogger(__name__)


class MessageCatalog:
    """Loaded message definitions across all languages.

    Example:
        >>> catalog = MessageCatalog()
        >>> catalog.add_messages("en", {"hello": MessageDefinition.plain("hello", "Hello")})
        >>> catalog.lookup("en", "hello").text()
        'Hello'
        >>> catalog.lookup("de", "hello") is None
        True
        >>> catalog.languages
        ('en',)
    """

    __slots__ = ("_languages", "_messages")

    def __init__(self) -> None:
        """Initialize an empty catalog."""
        self._messages: dict[LanguageTag, Mapping[MessageId, MessageDefinition]] = {}
        # dict used as an ordered set: first-seen order, duplicates ignored
        self._languages: dict[LanguageTag, None] = {}

    def add_messages(
        self,
        language: LanguageTag,
        definitions: Mapping[MessageId, MessageDefinition],
    ) -> None:
        """Upsert definitions for a language.

        A definition fully replaces any earlier one for the same id; plural
        forms are never merged across loads. The language is registered as
        known even when ``definitions`` is empty.

        Args:
            language: Canonical language tag
            definitions: Message id -> definition
        """
        self._languages.setdefault(language, None)

        merged = dict(self._messages.get(language, {}))
        merged.update(definitions)
        self._messages[language] = MappingProxyType(merged)

        logger.debug(
            "Catalog %s: %d definitions added, %d total",
            language,
            len(definitions),
            len(merged),
        )

    def lookup(self, language: LanguageTag, message_id: MessageId) -> MessageDefinition | None:
        """Exact lookup of one definition. No fallback."""
        messages = self._messages.get(language)
        if messages is None:
            return None
        return messages.get(message_id)

    def messages_for(self, language: LanguageTag) -> Mapping[MessageId, MessageDefinition] | None:
        """Immutable snapshot of all definitions of one language."""
        return self._messages.get(language)

    def message_ids(self, language: LanguageTag) -> list[MessageId]:
        """Message ids loaded for a language, in load order."""
        return list(self._messages.get(language, {}))

    @property
    def languages(self) -> tuple[LanguageTag, ...]:
        """Known languages in first-seen order."""
        return tuple(self._languages)

    def __contains__(self, language: object) -> bool:
        """Check whether a language has been registered."""
        return language in self._languages

    def __iter__(self) -> Iterator[LanguageTag]:
        """Iterate over known languages."""
        return iter(self._languages)

    def __len__(self) -> int:
        """Total number of definitions across all languages."""
        return sum(len(messages) for messages in self._messages.values())

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"MessageCatalog(languages={self.languages!r}, messages={len(self)})"

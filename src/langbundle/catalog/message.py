"""Message definitions held by the catalog.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from langbundle.enums import PluralCategory

__all__ = ["MessageDefinition", "text_of"]


def text_of(value: object) -> str:
    """Text form of a decoded or caller-supplied value.

    None becomes the empty string and booleans use their lower-case literal
    spelling (as written in JSON, YAML and TOML). Everything else goes
    through str().

    Example:
        >>> text_of(True)
        'true'
        >>> text_of(3)
        '3'
        >>> text_of(None)
        ''
    """
    match value:
        case None:
            return ""
        case bool():
            return "true" if value else "false"
        case str():
            return value
        case _:
            return str(value)


@dataclass(frozen=True, slots=True)
class MessageDefinition:
    """One translatable message for one language.

    Either a plain message (a single text stored as the ``other`` form, plural
    count is ignored) or a plural message (any subset of the six plural
    categories). Descriptive metadata is kept for tooling and never affects
    translation.

    Use the ``plain()`` and ``plural_forms()`` factories rather than the
    constructor.

    Attributes:
        id: Message identifier
        forms: Plural category -> text (read-only view)
        plural: True when the message came from a plural message object
        description: Free-form translator note
        hash: Source hash carried by some catalog tools
    """

    id: str
    forms: Mapping[PluralCategory, str] = field(default_factory=dict)
    plural: bool = False
    description: str | None = None
    hash: str | None = None

    def __post_init__(self) -> None:
        """Freeze the forms mapping."""
        object.__setattr__(self, "forms", MappingProxyType(dict(self.forms)))

    @classmethod
    def plain(cls, message_id: str, text: str) -> MessageDefinition:
        """Create a single-text message.

        Example:
            >>> MessageDefinition.plain("hello", "Hello").text()
            'Hello'
        """
        return cls(message_id, {PluralCategory.OTHER: text})

    @classmethod
    def plural_forms(
        cls,
        message_id: str,
        forms: Mapping[PluralCategory, str],
        *,
        description: str | None = None,
        hash: str | None = None,  # noqa: A002 - catalog field name
    ) -> MessageDefinition:
        """Create a message with plural category variants."""
        return cls(message_id, forms, plural=True, description=description, hash=hash)

    @property
    def has_text(self) -> bool:
        """True if at least one form carries text."""
        return bool(self.forms)

    def text(self, category: PluralCategory = PluralCategory.OTHER) -> str | None:
        """Text for a plural category, falling back to ``other``.

        Plain messages always answer with their single text.

        Returns:
            The text, or None if neither the category nor ``other`` exists
        """
        if not self.plural:
            return self.forms.get(PluralCategory.OTHER)
        found = self.forms.get(category)
        if found is None:
            found = self.forms.get(PluralCategory.OTHER)
        return found

"""Tests for MessageDefinition and MessageCatalog.

Python 3.13+.
"""

import pytest

from langbundle.catalog import MessageCatalog, MessageDefinition
from langbundle.catalog.message import text_of
from langbundle.enums import PluralCategory


class TestTextOf:
    """text_of renders decoded and caller values."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(None, ""), (True, "true"), (False, "false"), ("x", "x"), (7, "7"), (1.5, "1.5")],
    )
    def test_values(self, value: object, expected: str) -> None:
        """Each kind renders to its literal spelling."""
        assert text_of(value) == expected


class TestMessageDefinition:
    """MessageDefinition plain and plural forms."""

    def test_plain_ignores_category(self) -> None:
        """Plain messages answer every category with their text."""
        message = MessageDefinition.plain("hello", "Hello")
        assert not message.plural
        assert message.text(PluralCategory.ONE) == "Hello"

    def test_plural_falls_back_to_other(self) -> None:
        """A missing category falls back to other."""
        message = MessageDefinition.plural_forms("items", {PluralCategory.OTHER: "items"})
        assert message.text(PluralCategory.ONE) == "items"

    def test_plural_without_other(self) -> None:
        """Without other, an absent category has no text."""
        message = MessageDefinition.plural_forms("items", {PluralCategory.ONE: "item"})
        assert message.text(PluralCategory.OTHER) is None
        assert message.text(PluralCategory.ONE) == "item"

    def test_forms_read_only(self) -> None:
        """The forms mapping cannot be mutated."""
        message = MessageDefinition.plain("hello", "Hello")
        with pytest.raises(TypeError):
            message.forms[PluralCategory.ONE] = "x"  # type: ignore[index]

    def test_frozen(self) -> None:
        """Definitions are immutable."""
        message = MessageDefinition.plain("hello", "Hello")
        with pytest.raises(AttributeError):
            message.id = "other"  # type: ignore[misc]


class TestMessageCatalog:
    """MessageCatalog storage semantics."""

    def test_last_write_wins(self) -> None:
        """A later definition fully replaces an earlier one."""
        catalog = MessageCatalog()
        catalog.add_messages("en", {"k": MessageDefinition.plain("k", "A")})
        catalog.add_messages("en", {"k": MessageDefinition.plain("k", "B")})
        found = catalog.lookup("en", "k")
        assert found is not None
        assert found.text() == "B"

    def test_plural_forms_not_merged(self) -> None:
        """A reloaded plural message does not keep forms from the old one."""
        catalog = MessageCatalog()
        catalog.add_messages(
            "en",
            {
                "items": MessageDefinition.plural_forms(
                    "items", {PluralCategory.ONE: "item", PluralCategory.OTHER: "items"}
                )
            },
        )
        catalog.add_messages(
            "en", {"items": MessageDefinition.plural_forms("items", {PluralCategory.OTHER: "x"})}
        )
        found = catalog.lookup("en", "items")
        assert found is not None
        assert PluralCategory.ONE not in found.forms

    def test_languages_first_seen_order(self) -> None:
        """Languages are listed once, in first-seen order, even when empty."""
        catalog = MessageCatalog()
        catalog.add_messages("ja", {})
        catalog.add_messages("en", {"a": MessageDefinition.plain("a", "A")})
        catalog.add_messages("ja", {"a": MessageDefinition.plain("a", "エー")})
        assert catalog.languages == ("ja", "en")
        assert "ja" in catalog
        assert len(catalog) == 2

    def test_lookup_exact_only(self) -> None:
        """No fallback between languages at catalog level."""
        catalog = MessageCatalog()
        catalog.add_messages("en", {"a": MessageDefinition.plain("a", "A")})
        assert catalog.lookup("en-US", "a") is None
        assert catalog.lookup("en", "b") is None

    def test_snapshot_not_mutated_by_later_add(self) -> None:
        """Maps handed out earlier keep their contents after a reload."""
        catalog = MessageCatalog()
        catalog.add_messages("en", {"a": MessageDefinition.plain("a", "A")})
        snapshot = catalog.messages_for("en")
        catalog.add_messages("en", {"b": MessageDefinition.plain("b", "B")})
        assert snapshot is not None
        assert list(snapshot) == ["a"]
        assert catalog.message_ids("en") == ["a", "b"]

    def test_messages_for_unknown(self) -> None:
        """Unknown languages have no snapshot."""
        assert MessageCatalog().messages_for("xx") is None

"""Plural category selection.

A single two-category rule is applied for every language: a count of exactly
one selects ``one``, anything else selects ``other``. Catalog files may still
carry zero/two/few/many forms; they are stored and reachable through
MessageDefinition.text() but never selected here.

Python 3.13+. Zero external dependencies.
"""

from decimal import Decimal

from langbundle.enums import PluralCategory

__all__ = ["select_plural_category"]


def select_plural_category(count: int | float | Decimal | None) -> PluralCategory:
    """Select the plural category for a count.

    Args:
        count: Item count, or None when the caller supplied no count

    Returns:
        PluralCategory.ONE for exactly 1, PluralCategory.OTHER otherwise

    Examples:
        >>> select_plural_category(1)
        <PluralCategory.ONE: 'one'>
        >>> select_plural_category(0)
        <PluralCategory.OTHER: 'other'>
        >>> select_plural_category(None)
        <PluralCategory.OTHER: 'other'>
    """
    if count is not None and count == 1:
        return PluralCategory.ONE
    return PluralCategory.OTHER

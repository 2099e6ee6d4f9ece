"""Per-call translation options.

TranslateOptions bundles the optional inputs of Bundle.translate(). Callers
may pass one positionally, use keyword arguments, or both; keyword arguments
are applied on top of the options object.

Template data may be given as a mapping or as a flat sequence of alternating
key/value pairs ("Name", "Ada", "Age", 36). Malformed pair sequences are
tolerated: an odd trailing key is dropped and non-string keys are skipped.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import contextvars
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, replace
from decimal import Decimal
from types import MappingProxyType

from langbundle.catalog.types import TemplateData
from langbundle.constants import COUNT_KEY

__all__ = ["TemplateDataInput", "TranslateOptions", "build_template_data", "coerce_template_data"]

type TemplateDataInput = TemplateData | Sequence[object]
"""Template data as accepted from callers: mapping or flat key/value pairs."""


@dataclass(frozen=True, slots=True)
class TranslateOptions:
    """Optional inputs of one translate() call.

    Attributes:
        lang: Explicit target language (highest precedence)
        data: Template data, mapping or flat key/value pairs
        count: Plural count, also exposed to templates as ``Count``
        context: contextvars.Context carrying a language (second precedence)

    Example:
        >>> opts = TranslateOptions(lang="ja", count=3)
        >>> opts.merged(count=1).count
        1
        >>> opts.merged(count=None).count
        3
    """

    lang: str | None = None
    data: TemplateDataInput | None = None
    count: int | float | Decimal | None = None
    context: contextvars.Context | None = None

    def merged(
        self,
        *,
        lang: str | None = None,
        data: TemplateDataInput | None = None,
        count: int | float | Decimal | None = None,
        context: contextvars.Context | None = None,
    ) -> TranslateOptions:
        """Return options with every explicitly supplied (non-None) value applied."""
        changes: dict[str, object] = {}
        if lang is not None:
            changes["lang"] = lang
        if data is not None:
            changes["data"] = data
        if count is not None:
            changes["count"] = count
        if context is not None:
            changes["context"] = context
        if not changes:
            return self
        return replace(self, **changes)


def coerce_template_data(data: TemplateDataInput | None) -> dict[str, object]:
    """Normalize caller-supplied template data to a dict.

    Args:
        data: Mapping, flat pair sequence, or None

    Returns:
        A new dict (never the caller's object)

    Example:
        >>> coerce_template_data(["Name", "Ada", "Age"])
        {'Name': 'Ada'}
        >>> coerce_template_data([1, "x", "Name", "Ada"])
        {'Name': 'Ada'}
    """
    match data:
        case None:
            return {}
        case Mapping():
            return {key: value for key, value in data.items() if isinstance(key, str)}
        case str() | bytes():
            # A bare string is not a pair sequence
            return {}
        case Sequence():
            result: dict[str, object] = {}
            for index in range(0, len(data) - 1, 2):
                key = data[index]
                if isinstance(key, str):
                    result[key] = data[index + 1]
            return result
        case _:
            return {}


def build_template_data(
    data: TemplateDataInput | None,
    count: int | float | Decimal | None,
) -> TemplateData:
    """Template data for rendering, with the plural count injected as ``Count``.

    A caller-supplied ``Count`` is overwritten when a count is given.
    """
    result = coerce_template_data(data)
    if count is not None:
        result[COUNT_KEY] = count
    return MappingProxyType(result)

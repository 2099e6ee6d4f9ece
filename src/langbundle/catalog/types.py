"""Type aliases for the catalog domain.

Provides semantic type aliases used throughout the catalog package and by
user code when annotating Bundle call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping, Sequence

__all__ = [
    "DecodedValue",
    "LanguageTag",
    "MessageId",
    "RawDocument",
    "TemplateData",
]

type MessageId = str
"""Dot-delimited message identifier (e.g., 'confirm', 'common.confirm')."""

type LanguageTag = str
"""Language tag with '-' separators (e.g., 'en', 'zh-CN', 'zh-Hans')."""

type DecodedValue = (
    str
    | int
    | float
    | bool
    | None
    | Mapping[object, "DecodedValue"]
    | Sequence["DecodedValue"]
    | object
)
"""Any value a JSON/YAML/TOML decoder may produce."""

type RawDocument = Mapping[object, DecodedValue]
"""Decoded catalog document: a tree of mappings, strings and scalars."""

type TemplateData = Mapping[str, object]
"""Values substituted into {{.Key}} placeholders."""

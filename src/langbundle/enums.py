"""Enumerations for langbundle type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so they compare equal to the raw
values found in decoded catalog files.

Python 3.13+.
"""

from enum import StrEnum


class MissPolicy(StrEnum):
    """What translate() returns when no definition exists.

    StrEnum provides automatic string conversion: str(MissPolicy.RETURN_ID) == "return_id"
    """

    RETURN_ID = "return_id"
    """Return the message identifier itself (default)."""

    RETURN_EMPTY = "return_empty"
    """Return an empty string."""


class PluralCategory(StrEnum):
    """Plural category names a message definition may carry."""

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"
    """Catch-all form. Plain (non-plural) messages store their text here."""


class CatalogFormat(StrEnum):
    """Serialized syntaxes accepted by the format decoder."""

    JSON = "json"
    YAML = "yaml"
    YML = "yml"
    TOML = "toml"

    @classmethod
    def from_name(cls, name: str) -> "CatalogFormat":
        """Resolve a format from a name or extension (".json", "YAML", ...).

        Raises:
            ValueError: If the name does not denote a supported format
        """
        return cls(name.strip().lstrip(".").lower())


class NodeKind(StrEnum):
    """Classification of a decoded catalog value during ingest."""

    TEXT = "text"
    """Plain string: shorthand for a single-form message."""

    MESSAGE = "message"
    """Mapping holding at least one reserved key: a full message object."""

    NAMESPACE = "namespace"
    """Mapping without reserved keys: recurse into its children."""

    SCALAR = "scalar"
    """Anything else: coerced to text and treated as shorthand."""


class LangSource(StrEnum):
    """Places the request language detector looks at."""

    QUERY = "query"
    """URL query parameter, e.g. ?lang=zh-CN"""

    COOKIE = "cookie"
    """Cookie value."""

    HEADER = "header"
    """Accept-Language request header."""


__all__ = [
    "CatalogFormat",
    "LangSource",
    "MissPolicy",
    "NodeKind",
    "PluralCategory",
]

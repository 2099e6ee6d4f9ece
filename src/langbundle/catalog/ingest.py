"""Catalog ingest: flatten decoded documents into message definitions.

Receives an already-decoded generic tree (mappings, sequences, strings,
scalars) and produces flat {message_id: MessageDefinition} pairs. Knows
nothing about JSON, YAML or TOML.

Shapes accepted at every nesting level:

    hello: Hello                     # shorthand text
    common:                          # namespace -> "common.confirm"
      confirm: OK
    items:                           # message object (has a reserved key)
      one: "{{.Count}} item"
      other: "{{.Count}} items"
      description: Cart badge

Whether a nested mapping is a message object or a namespace is decided by
classify_node() using RESERVED_MESSAGE_KEYS.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping

from langbundle.catalog.message import MessageDefinition, text_of
from langbundle.catalog.types import DecodedValue, MessageId, RawDocument
from langbundle.constants import NAMESPACE_SEPARATOR, PLURAL_KEYS, RESERVED_MESSAGE_KEYS
from langbundle.enums import NodeKind, PluralCategory

__all__ = [
    "RESERVED_MESSAGE_KEYS",
    "build_message",
    "classify_node",
    "flatten_document",
    "is_message_object",
]


def is_message_object(node: Mapping[object, DecodedValue]) -> bool:
    """Check whether a mapping is a message object rather than a namespace.

    Example:
        >>> is_message_object({"one": "item", "other": "items"})
        True
        >>> is_message_object({"confirm": "OK", "cancel": "Cancel"})
        False
    """
    return any(key in RESERVED_MESSAGE_KEYS for key in node)


def classify_node(value: DecodedValue) -> NodeKind:
    """Decide how ingest treats a decoded value."""
    match value:
        case str():
            return NodeKind.TEXT
        case Mapping() if is_message_object(value):
            return NodeKind.MESSAGE
        case Mapping():
            return NodeKind.NAMESPACE
        case _:
            return NodeKind.SCALAR


def build_message(message_id: MessageId, node: Mapping[object, DecodedValue]) -> MessageDefinition:
    """Build a plural message definition from a message object.

    Keys outside RESERVED_MESSAGE_KEYS (such as an explicit "id") are ignored.
    Non-string form values are coerced to text.
    """
    forms = {
        PluralCategory(key): text_of(node[key])
        for key in PLURAL_KEYS
        if key in node
    }
    description = node.get("description")
    digest = node.get("hash")
    return MessageDefinition.plural_forms(
        message_id,
        forms,
        description=None if description is None else text_of(description),
        hash=None if digest is None else text_of(digest),
    )


def flatten_document(
    raw: RawDocument,
    prefix: str = "",
) -> dict[MessageId, MessageDefinition]:
    """Flatten a nested document into message definitions.

    Args:
        raw: Decoded document (mapping at the top level)
        prefix: Identifier prefix of the enclosing namespace

    Returns:
        Mapping of full dot-delimited message id to definition. Message objects
        without any text form (e.g. a bare description) are dropped.

    Example:
        >>> flat = flatten_document({"common": {"confirm": "OK"}})
        >>> flat["common.confirm"].text()
        'OK'
    """
    result: dict[MessageId, MessageDefinition] = {}

    for key, value in raw.items():
        segment = key if isinstance(key, str) else text_of(key)
        full_key = f"{prefix}{NAMESPACE_SEPARATOR}{segment}" if prefix else segment

        match classify_node(value):
            case NodeKind.TEXT:
                result[full_key] = MessageDefinition.plain(full_key, value)  # type: ignore[arg-type]
            case NodeKind.MESSAGE:
                message = build_message(full_key, value)  # type: ignore[arg-type]
                if message.has_text:
                    result[full_key] = message
            case NodeKind.NAMESPACE:
                result.update(flatten_document(value, full_key))  # type: ignore[arg-type]
            case NodeKind.SCALAR:
                result[full_key] = MessageDefinition.plain(full_key, text_of(value))

    return result

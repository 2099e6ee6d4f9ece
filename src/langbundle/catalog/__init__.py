"""Message catalog package.

Provides the data side of langbundle: message definitions, the catalog,
format decoding, ingest (flattening) and file discovery.

Submodules:
    types    - PEP 695 type aliases (MessageId, LanguageTag, RawDocument, ...)
    message  - MessageDefinition
    ingest   - flatten_document, classify_node, is_message_object
    catalog  - MessageCatalog
    decoding - decode_document (JSON / YAML / TOML)
    loading  - iter_directory, iter_resources, LoadedFile

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from langbundle.catalog.catalog import MessageCatalog
from langbundle.catalog.decoding import decode_document, resolve_format
from langbundle.catalog.ingest import (
    RESERVED_MESSAGE_KEYS,
    classify_node,
    flatten_document,
    is_message_object,
)
from langbundle.catalog.loading import CatalogSource, LoadedFile, iter_directory, iter_resources
from langbundle.catalog.message import MessageDefinition
from langbundle.catalog.types import LanguageTag, MessageId, RawDocument, TemplateData

__all__ = [
    # Catalog
    "MessageCatalog",
    "MessageDefinition",
    # Ingest
    "RESERVED_MESSAGE_KEYS",
    "classify_node",
    "flatten_document",
    "is_message_object",
    # Decoding and discovery
    "decode_document",
    "resolve_format",
    "iter_directory",
    "iter_resources",
    "CatalogSource",
    "LoadedFile",
    # Type aliases
    "LanguageTag",
    "MessageId",
    "RawDocument",
    "TemplateData",
]

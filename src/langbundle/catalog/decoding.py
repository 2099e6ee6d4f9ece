"""Format decoders for catalog documents.

Turns raw bytes in one of the supported syntaxes into a generic decoded
tree. The tree is then handed to catalog ingest, which is format-agnostic.

Decoders:
    json      - standard library json
    yaml, yml - PyYAML SafeLoader, booleans restricted to true/false
    toml      - standard library tomllib

Python 3.13+. External dependency: PyYAML.
"""

from __future__ import annotations

import json
import re
import tomllib
from collections.abc import Callable, Mapping

import yaml

from langbundle.catalog.types import DecodedValue, RawDocument
from langbundle.diagnostics import CatalogDecodeError, UnsupportedFormatError
from langbundle.enums import CatalogFormat

__all__ = ["decode_document", "resolve_format"]


def _decode_json(text: str) -> DecodedValue:
    return json.loads(text)


_BOOL_TAG = "tag:yaml.org,2002:bool"


class _CatalogLoader(yaml.SafeLoader):
    """SafeLoader that resolves only true/false as booleans.

    YAML 1.1 also reads yes/no/on/off (any casing) as booleans, which would
    turn ids such as "yes" and texts such as "on" into True/False.
    """


_CatalogLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
_CatalogLoader.add_implicit_resolver(
    _BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def _decode_yaml(text: str) -> DecodedValue:
    return yaml.load(text, Loader=_CatalogLoader)  # noqa: S506 - SafeLoader subclass


def _decode_toml(text: str) -> DecodedValue:
    return tomllib.loads(text)


_DECODERS: dict[CatalogFormat, Callable[[str], DecodedValue]] = {
    CatalogFormat.JSON: _decode_json,
    CatalogFormat.YAML: _decode_yaml,
    CatalogFormat.YML: _decode_yaml,
    CatalogFormat.TOML: _decode_toml,
}

# Exceptions meaning "the bytes are not valid for this format".
# JSONDecodeError is a ValueError subclass.
_DECODE_ERRORS: tuple[type[Exception], ...] = (
    ValueError,
    UnicodeDecodeError,
    yaml.YAMLError,
    tomllib.TOMLDecodeError,
)


def resolve_format(name: str | CatalogFormat) -> CatalogFormat:
    """Resolve a format name or file extension.

    Args:
        name: "json", ".yaml", "TOML", or a CatalogFormat member

    Raises:
        UnsupportedFormatError: If the format is unknown
    """
    if isinstance(name, CatalogFormat):
        return name
    try:
        return CatalogFormat.from_name(name)
    except ValueError:
        raise UnsupportedFormatError(name) from None


def decode_document(
    data: bytes | str,
    fmt: str | CatalogFormat,
    *,
    source: str | None = None,
    language: str | None = None,
) -> RawDocument:
    """Decode catalog bytes into a generic tree.

    Args:
        data: Raw file content (bytes are decoded as UTF-8; a BOM is accepted)
        fmt: Declared format
        source: Path or description used in error messages
        language: Target language, recorded on raised errors

    Returns:
        The decoded top-level mapping. An empty YAML document decodes to {}.

    Raises:
        UnsupportedFormatError: If the format is unknown
        CatalogDecodeError: If the content is malformed or not a mapping
    """
    catalog_format = resolve_format(fmt)
    where = source or f"<{catalog_format} content>"

    try:
        text = data.decode("utf-8-sig") if isinstance(data, bytes) else data
        decoded = _DECODERS[catalog_format](text)
    except _DECODE_ERRORS as e:
        msg = f"Failed to decode {where} as {catalog_format}: {e}"
        raise CatalogDecodeError(msg, source=source, language=language) from e

    if decoded is None:
        return {}
    if not isinstance(decoded, Mapping):
        msg = (
            f"Catalog document {where} must be a mapping at the top level, "
            f"got {type(decoded).__name__}"
        )
        raise CatalogDecodeError(msg, source=source, language=language)
    return decoded

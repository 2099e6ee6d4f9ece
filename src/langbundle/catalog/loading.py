"""Catalog file discovery for directory and resource-tree loads.

Enumerates catalog files and reads their bytes. Decoding and ingest happen
in the Bundle; this module only knows about names, extensions and I/O.

Components:
    CatalogSource   - Immutable record of one discovered, read file
    LoadedFile      - Immutable result of one file merged into a catalog
    iter_directory  - Files directly inside a filesystem directory
    iter_resources  - Files anywhere below a Traversable (package data, zip)

File names carry the language: "en.json", "zh-CN.yaml", "messages.ja.toml".
Files with other extensions are skipped.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import TYPE_CHECKING

from langbundle.catalog.decoding import resolve_format
from langbundle.catalog.types import LanguageTag
from langbundle.constants import SUPPORTED_EXTENSIONS
from langbundle.diagnostics import CatalogReadError
from langbundle.enums import CatalogFormat
from langbundle.locale_utils import language_from_filename

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Records
    "CatalogSource",
    "LoadedFile",
    # Discovery
    "iter_directory",
    "iter_resources",
    "is_catalog_file",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CatalogSource:
    """One catalog file, read but not yet decoded.

    Attributes:
        language: Language derived from the file name (normalized, not validated)
        fmt: Format derived from the file extension
        source_path: Human-readable path for diagnostics
        data: Raw file content
    """

    language: str
    fmt: CatalogFormat
    source_path: str
    data: bytes


@dataclass(frozen=True, slots=True)
class LoadedFile:
    """Result of merging one catalog file into a bundle.

    Attributes:
        language: Canonical language tag the messages were stored under
        source_path: Human-readable path of the file
        message_count: Number of definitions the file contributed
    """

    language: LanguageTag
    source_path: str
    message_count: int


def is_catalog_file(name: str) -> bool:
    """Check whether a file name has a supported catalog extension.

    Example:
        >>> is_catalog_file("zh-CN.JSON")
        True
        >>> is_catalog_file("README.md")
        False
    """
    return PurePath(name).suffix.lower() in SUPPORTED_EXTENSIONS


def _make_source(name: str, source_path: str, data: bytes) -> CatalogSource:
    return CatalogSource(
        language=language_from_filename(name),
        fmt=resolve_format(PurePath(name).suffix),
        source_path=source_path,
        data=data,
    )


def iter_directory(directory: str | os.PathLike[str]) -> Iterator[CatalogSource]:
    """Yield catalog files directly inside a directory, sorted by name.

    Sub-directories are not descended into.

    Raises:
        CatalogReadError: If the directory or one of its files cannot be read
    """
    base = Path(directory)
    try:
        entries = sorted(base.iterdir(), key=lambda p: p.name)
    except OSError as e:
        msg = f"Failed to read directory {base}: {e}"
        raise CatalogReadError(msg, source=str(base)) from e

    for entry in entries:
        if not entry.is_file():
            continue
        if not is_catalog_file(entry.name):
            logger.debug("Skipping non-catalog file %s", entry)
            continue
        try:
            data = entry.read_bytes()
        except OSError as e:
            msg = f"Failed to read file {entry}: {e}"
            raise CatalogReadError(msg, source=str(entry)) from e
        yield _make_source(entry.name, str(entry), data)


def iter_resources(tree: Traversable, root: str = "") -> Iterator[CatalogSource]:
    """Yield catalog files anywhere below ``root`` in a resource tree.

    Walks depth-first in name order, like a lexical directory walk.

    Args:
        tree: Any importlib Traversable (package files, zip entries, Path)
        root: Slash-separated sub-path of ``tree`` to start from ("" = tree itself)

    Raises:
        CatalogReadError: If the root does not exist or a file cannot be read
    """
    start = tree.joinpath(*[part for part in root.split("/") if part]) if root else tree
    if not start.is_dir():
        msg = f"Resource root {root or start.name!r} is not a directory"
        raise CatalogReadError(msg, source=root or start.name)
    yield from _walk(start, root.strip("/"))


def _walk(node: Traversable, prefix: str) -> Iterator[CatalogSource]:
    try:
        children = sorted(node.iterdir(), key=lambda child: child.name)
    except OSError as e:
        msg = f"Failed to list resource directory {prefix or node.name}: {e}"
        raise CatalogReadError(msg, source=prefix or node.name) from e

    for child in children:
        path = f"{prefix}/{child.name}" if prefix else child.name
        if child.is_dir():
            yield from _walk(child, path)
            continue
        if not is_catalog_file(child.name):
            logger.debug("Skipping non-catalog resource %s", path)
            continue
        try:
            data = child.read_bytes()
        except OSError as e:
            msg = f"Failed to read resource {path}: {e}"
            raise CatalogReadError(msg, source=path) from e
        yield _make_source(child.name, path, data)

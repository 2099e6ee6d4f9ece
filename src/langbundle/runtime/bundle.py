"""Bundle - Main API for message lookup and translation.

A Bundle owns one message catalog plus the language settings used to pick
from it. translate() never raises for a missing message: the configured miss
policy decides what is returned.

Python 3.13+. External dependencies: Babel (tag grammar), PyYAML (YAML catalogs).
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from decimal import Decimal
from typing import TYPE_CHECKING

from langbundle.catalog.catalog import MessageCatalog
from langbundle.catalog.decoding import decode_document, resolve_format
from langbundle.catalog.ingest import flatten_document
from langbundle.catalog.loading import CatalogSource, LoadedFile, iter_directory, iter_resources
from langbundle.catalog.message import MessageDefinition, text_of
from langbundle.constants import LOG_TRUNCATE
from langbundle.diagnostics import CatalogLoadError
from langbundle.enums import CatalogFormat, MissPolicy
from langbundle.locale_utils import normalize_language_tag, resolve_language_tag
from langbundle.runtime.cache import ResolverCache
from langbundle.runtime.config import BundleConfig
from langbundle.runtime.context import language_in_context
from langbundle.runtime.options import TemplateDataInput, TranslateOptions, build_template_data
from langbundle.runtime.resolver import Resolver, build_resolver
from langbundle.runtime.rwlock import RWLock
from langbundle.runtime.template import render_template

if TYPE_CHECKING:
    import contextvars
    from collections.abc import Iterable
    from importlib.resources.abc import Traversable

    from langbundle.catalog.types import LanguageTag, MessageId

__all__ = ["Bundle"]

logger = logging.getLogger(__name__)


class Bundle:
    """Translation bundle: catalog, language settings and resolver cache.

    Thread Safety:
        Always thread-safe. Translations and setting queries take a shared
        read lock; loads and setting changes take the exclusive write lock.
        Instances share no mutable state.

    Language settings:
        current  - used when a call names no language and no context language
                   is bound (set_lang / get_lang)
        default  - initial current language; also substituted for language
                   tags that do not parse
        fallback - consulted when the requested language lacks a message

    Example:
        >>> bundle = Bundle()
        >>> bundle.load_messages("en", {"greeting": "Hello, {{.Name}}"})
        >>> bundle.translate("greeting", data={"Name": "Ada"})
        'Hello, Ada'
        >>> bundle.translate("greeting", lang="ja", data=["Name", "Ada"])
        'Hello, Ada'
        >>> bundle.translate("nope")
        'nope'
    """

    __slots__ = (
        "_cache",
        "_catalog",
        "_config",
        "_current_lang",
        "_default_lang",
        "_fallback_lang",
        "_fallback_tag",
        "_lock",
        "_miss_handler",
        "_miss_logger",
        "_miss_policy",
    )

    def __init__(self, config: BundleConfig | None = None) -> None:
        """Initialize an empty bundle.

        Args:
            config: Bundle configuration (default: BundleConfig())
        """
        config = config if config is not None else BundleConfig()
        self._config = config
        self._catalog = MessageCatalog()
        self._lock = RWLock()
        self._cache = ResolverCache(maxsize=config.cache_size)

        self._default_lang = normalize_language_tag(config.default_lang)
        self._current_lang = self._default_lang
        self._fallback_lang = normalize_language_tag(config.fallback_lang)
        self._fallback_tag = resolve_language_tag(self._fallback_lang, self._default_lang)

        self._miss_handler = config.miss_handler
        self._miss_policy = config.miss_policy
        self._miss_logger = config.logger

        logger.info(
            "Bundle initialized (default=%s, fallback=%s, miss_policy=%s, cache_size=%d)",
            self._default_lang,
            self._fallback_lang,
            self._miss_policy,
            config.cache_size,
        )

    @property
    def config(self) -> BundleConfig:
        """Configuration the bundle was created with (read-only)."""
        return self._config

    @property
    def catalog(self) -> MessageCatalog:
        """Underlying message catalog.

        Intended for inspection. Mutating it directly bypasses the bundle's
        lock and resolver cache.
        """
        return self._catalog

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"Bundle(lang={self._current_lang!r}, fallback={self._fallback_lang!r}, "
            f"languages={list(self._catalog.languages)!r})"
        )

    # ------------------------------------------------------------------
    # Language settings
    # ------------------------------------------------------------------

    def set_lang(self, lang: str) -> None:
        """Set the current language (stored normalized)."""
        language = normalize_language_tag(lang)
        with self._lock.write():
            self._current_lang = language
        logger.debug("Current language set to %s", language)

    def get_lang(self) -> str:
        """Get the current language."""
        with self._lock.read():
            return self._current_lang

    def set_default_lang(self, lang: str) -> None:
        """Set the default language.

        Does not change the current language. The default is the substitute
        for unparseable tags, so the resolver cache is cleared.
        """
        language = normalize_language_tag(lang)
        with self._lock.write():
            self._default_lang = language
            self._fallback_tag = resolve_language_tag(self._fallback_lang, self._default_lang)
            self._cache.clear()
        logger.debug("Default language set to %s", language)

    def set_fallback_lang(self, lang: str) -> None:
        """Set the fallback language and clear the resolver cache."""
        language = normalize_language_tag(lang)
        with self._lock.write():
            self._fallback_lang = language
            self._fallback_tag = resolve_language_tag(self._fallback_lang, self._default_lang)
            self._cache.clear()
        logger.debug("Fallback language set to %s", language)

    @property
    def default_lang(self) -> str:
        """Default language."""
        with self._lock.read():
            return self._default_lang

    @property
    def fallback_lang(self) -> str:
        """Fallback language."""
        with self._lock.read():
            return self._fallback_lang

    def languages(self) -> list[LanguageTag]:
        """Canonical tags of every loaded language, in first-load order."""
        with self._lock.read():
            return list(self._catalog.languages)

    # ------------------------------------------------------------------
    # Translation
    # ------------------------------------------------------------------

    def translate(
        self,
        message_id: MessageId,
        options: TranslateOptions | None = None,
        /,
        *,
        lang: str | None = None,
        data: TemplateDataInput | None = None,
        count: int | float | Decimal | None = None,
        context: contextvars.Context | None = None,
    ) -> str:
        """Translate a message.

        Language precedence: ``lang`` > language bound in ``context`` (or, when
        no context is given, in the current context) > current language.

        Args:
            message_id: Dot-delimited message identifier
            options: Options object; keyword arguments are applied on top of it
            lang: Explicit target language
            data: Template data, mapping or flat key/value pairs
            count: Plural count, exposed to templates as ``Count``
            context: Context carrying a language (see context_with_lang)

        Returns:
            Rendered text. On a miss: the message id (MissPolicy.RETURN_ID) or
            "" (MissPolicy.RETURN_EMPTY).

        Example:
            >>> bundle.translate("items", count=1)
            '1 item'
            >>> bundle.translate("items", TranslateOptions(count=5))
            '5 items'
        """
        opts = (options if options is not None else TranslateOptions()).merged(
            lang=lang, data=data, count=count, context=context
        )

        with self._lock.read():
            requested = opts.lang or language_in_context(opts.context) or self._current_lang
            language = normalize_language_tag(requested)
            resolved = self._resolver_for(language).get(message_id, opts.count)

        # Outside the lock: the miss handler may call back into the bundle
        if resolved is None:
            return self._handle_miss(language, message_id)

        logger.debug(
            "Resolved %s for %s from %s (%s)",
            repr(message_id[:LOG_TRUNCATE]),
            language,
            resolved.language,
            resolved.category,
        )
        return render_template(resolved.text, build_template_data(opts.data, opts.count))

    t = translate

    def has_message(self, message_id: MessageId, lang: str | None = None) -> bool:
        """Check whether translate() would find a definition.

        Looks in ``lang`` (default: current language) and the fallback language.
        Plural definitions without an ``other`` form may still miss for some
        counts.
        """
        with self._lock.read():
            language = normalize_language_tag(lang or self._current_lang)
            return self._resolver_for(language).has_message(message_id)

    def cache_stats(self) -> dict[str, int | float]:
        """Resolver cache statistics (size, maxsize, hits, misses, hit_rate)."""
        return self._cache.get_stats()

    def _resolver_for(self, language: str) -> Resolver:
        """Cached resolver for a language. Caller holds the read lock."""
        tag = resolve_language_tag(language, self._default_lang)
        resolver = self._cache.get(tag)
        if resolver is None:
            resolver = build_resolver(self._catalog, tag, self._fallback_tag)
            self._cache.put(tag, resolver)
        return resolver

    def _handle_miss(self, language: str, message_id: MessageId) -> str:
        if self._miss_handler is not None:
            self._miss_handler(language, message_id)
        if self._miss_logger is not None:
            self._miss_logger.warning(
                "Missing translation %s for language %s",
                repr(message_id[:LOG_TRUNCATE]),
                language,
            )
        match self._miss_policy:
            case MissPolicy.RETURN_EMPTY:
                return ""
            case _:
                return message_id

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load_messages(self, lang: str, messages: Mapping[str, object]) -> None:
        """Load flat, already-decoded messages for one language.

        Args:
            lang: Target language
            messages: Message id -> text (values are coerced to text)

        Example:
            >>> bundle.load_messages("zh-CN", {"confirm": "确认"})
        """
        definitions = {
            text_of(key): MessageDefinition.plain(text_of(key), text_of(value))
            for key, value in messages.items()
        }
        self._apply([(lang, definitions, "<messages>")])

    def load_content(
        self,
        lang: str,
        fmt: str | CatalogFormat,
        data: bytes | str,
        *,
        source_path: str | None = None,
    ) -> LoadedFile:
        """Decode and load one catalog document for a language.

        Args:
            lang: Target language
            fmt: "json", "yaml", "yml" or "toml" (leading dot and case ignored)
            data: Document content
            source_path: Description used in logs and errors

        Returns:
            Summary of what was loaded

        Raises:
            UnsupportedFormatError: If the format is unknown
            CatalogDecodeError: If the content is malformed or not a mapping
        """
        catalog_format = resolve_format(fmt)
        where = source_path or f"<{catalog_format} content>"
        raw = data if isinstance(data, bytes) else data.encode()
        source = CatalogSource(lang, catalog_format, where, raw)
        return self._load_sources([source])[0]

    def load(self, directory: str | os.PathLike[str]) -> tuple[LoadedFile, ...]:
        """Load every catalog file directly inside a directory.

        The language of each file comes from its name (``zh-CN.yaml``,
        ``messages.ja.json``). Sub-directories and files with other
        extensions are skipped.

        All files are read and decoded before any of them is merged: a load
        that raises leaves the catalog unchanged.

        Raises:
            CatalogReadError: If the directory or a file cannot be read
            CatalogDecodeError: If a file is malformed
        """
        return self._load_sources(iter_directory(directory), origin=os.fspath(directory))

    def load_resources(self, tree: Traversable, root: str = "") -> tuple[LoadedFile, ...]:
        """Load every catalog file below ``root`` in a resource tree.

        Accepts any importlib Traversable, e.g.
        ``importlib.resources.files("myapp") / "locales"``. The tree is walked
        recursively. Same atomicity as load().

        Raises:
            CatalogReadError: If the root is missing or a resource cannot be read
            CatalogDecodeError: If a resource is malformed
        """
        return self._load_sources(iter_resources(tree, root), origin=root or tree.name)

    def _load_sources(
        self,
        sources: Iterable[CatalogSource],
        origin: str | None = None,
    ) -> tuple[LoadedFile, ...]:
        """Decode every source, then merge them all under one write lock."""
        batches: list[tuple[str, dict[MessageId, MessageDefinition], str]] = []
        try:
            for source in sources:
                document = decode_document(
                    source.data,
                    source.fmt,
                    source=source.source_path,
                    language=source.language,
                )
                batches.append((source.language, flatten_document(document), source.source_path))
        except CatalogLoadError as e:
            logger.error("Failed to load catalog %s: %s", e.source or origin, e)
            raise

        loaded = self._apply(batches)
        if origin is not None:
            logger.info("Loaded %d catalog files from %s", len(loaded), origin)
        return loaded

    def _apply(
        self,
        batches: list[tuple[str, dict[MessageId, MessageDefinition], str]],
    ) -> tuple[LoadedFile, ...]:
        loaded: list[LoadedFile] = []
        with self._lock.write():
            for lang, definitions, source_path in batches:
                tag = resolve_language_tag(lang, self._default_lang)
                self._catalog.add_messages(tag, definitions)
                loaded.append(LoadedFile(tag, source_path, len(definitions)))
            self._cache.clear()

        for record in loaded:
            logger.info(
                "Loaded %s: %d messages for %s",
                record.source_path,
                record.message_count,
                record.language,
            )
        return tuple(loaded)

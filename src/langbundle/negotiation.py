"""Request language detection.

Picks a language for an incoming request from its query parameters, cookies
and Accept-Language header. Operates on plain mappings so it can sit behind
any web framework; wiring it into a server is left to the application:

    lang = detect_language(
        query=request.query_params,
        cookies=request.cookies,
        headers=request.headers,
    )
    with language_scope(lang):
        ...

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from langbundle.enums import LangSource
from langbundle.locale_utils import normalize_language_tag

if TYPE_CHECKING:
    from langbundle.runtime.bundle import Bundle

__all__ = ["ACCEPT_LANGUAGE_HEADER", "DetectorConfig", "detect_language", "parse_accept_language"]

logger = logging.getLogger(__name__)

ACCEPT_LANGUAGE_HEADER: str = "Accept-Language"

type QueryValues = Mapping[str, str | Sequence[str]]
"""Query parameters; multi-valued parameters (as from parse_qs) use their first value."""


@dataclass(frozen=True, slots=True)
class DetectorConfig:
    """Where detect_language() looks and in which order.

    Attributes:
        sources: Sources tried in order (default: query, cookie, header)
        query_param: Query parameter name (default: "lang")
        cookie_name: Cookie name (default: "lang")
        default_lang: Returned when no source yields a language; when empty,
            the bundle's current language is returned instead

    Example:
        >>> config = DetectorConfig(sources=(LangSource.HEADER,), default_lang="en")
        >>> detect_language(headers={"accept-language": "ja,en;q=0.8"}, config=config)
        'ja'
    """

    sources: tuple[LangSource, ...] = (LangSource.QUERY, LangSource.COOKIE, LangSource.HEADER)
    query_param: str = "lang"
    cookie_name: str = "lang"
    default_lang: str = ""

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If no source is configured or a source is unknown
        """
        if not self.sources:
            msg = "sources must not be empty"
            raise ValueError(msg)
        object.__setattr__(self, "sources", tuple(LangSource(s) for s in self.sources))


def parse_accept_language(header: str | None) -> str:
    """First language range of an Accept-Language header, without its weight.

    Weights are not compared: the first listed range wins, as browsers list
    ranges in preference order.

    Example:
        >>> parse_accept_language("zh-CN,zh;q=0.9,en;q=0.8")
        'zh-CN'
        >>> parse_accept_language("fr;q=0.7")
        'fr'
        >>> parse_accept_language("")
        ''
    """
    if not header:
        return ""
    first = header.split(",", 1)[0]
    return first.split(";", 1)[0].strip()


def _query_value(query: QueryValues | None, name: str) -> str:
    if not query:
        return ""
    value = query.get(name)
    match value:
        case None:
            return ""
        case str():
            return value
        case Sequence() if value:
            first = value[0]
            return first if isinstance(first, str) else ""
        case _:
            return ""


def _header_value(headers: Mapping[str, str] | None, name: str) -> str:
    if not headers:
        return ""
    value = headers.get(name)
    if value is not None:
        return value
    # Plain dicts are case-sensitive; HTTP header names are not
    lowered = name.lower()
    for key, candidate in headers.items():
        if key.lower() == lowered:
            return candidate
    return ""


def detect_language(
    *,
    query: QueryValues | None = None,
    cookies: Mapping[str, str] | None = None,
    headers: Mapping[str, str] | None = None,
    config: DetectorConfig | None = None,
    bundle: Bundle | None = None,
) -> str:
    """Detect the language of a request.

    Each configured source is tried in order; the first non-empty value wins
    and is returned normalized ("zh_CN" -> "zh-CN"). No validation against
    loaded languages happens here: unknown languages fall back at
    translation time.

    Args:
        query: Query parameters
        cookies: Cookie name -> value
        headers: Request headers
        config: Detection settings (default: DetectorConfig())
        bundle: Bundle whose current language is the last resort
            (default: the process-wide default bundle)

    Returns:
        Normalized language
    """
    config = config if config is not None else DetectorConfig()

    for source in config.sources:
        match source:
            case LangSource.QUERY:
                value = _query_value(query, config.query_param)
            case LangSource.COOKIE:
                value = (cookies or {}).get(config.cookie_name) or ""
            case LangSource.HEADER:
                value = parse_accept_language(_header_value(headers, ACCEPT_LANGUAGE_HEADER))
        if value:
            logger.debug("Request language %s from %s", value, source)
            return normalize_language_tag(value)

    if config.default_lang:
        return normalize_language_tag(config.default_lang)
    if bundle is None:
        from langbundle.default import default  # noqa: PLC0415 - circular

        bundle = default()
    return bundle.get_lang()

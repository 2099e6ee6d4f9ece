"""Configuration for Bundle.

A single frozen dataclass carrying every construction-time setting of a
Bundle. Language settings given here are normalized by the Bundle; they are
only checked for emptiness at construction.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from langbundle.constants import DEFAULT_LANGUAGE, MAX_RESOLVER_CACHE_SIZE
from langbundle.enums import MissPolicy

__all__ = ["BundleConfig", "MissHandler"]

type MissHandler = Callable[[str, str], object]
"""Called with (language, message_id) once per missing translation."""


@dataclass(frozen=True, slots=True)
class BundleConfig:
    """Immutable configuration for a Bundle.

    All fields have defaults; ``BundleConfig()`` gives an English bundle that
    returns the message id for missing translations.

    Attributes:
        default_lang: Initial current language, and the substitute for
            language tags that do not parse (default: "en")
        fallback_lang: Language consulted when the requested one lacks a
            message (default: "en")
        miss_handler: Callback invoked with (language, message_id) on a miss
        miss_policy: What translate() returns on a miss (default: RETURN_ID)
        logger: Logger receiving a warning per miss (default: None, silent)
        cache_size: Maximum cached per-language resolvers (default: 128)

    Example:
        >>> import logging
        >>> config = BundleConfig(
        ...     default_lang="zh_CN",
        ...     miss_policy=MissPolicy.RETURN_EMPTY,
        ...     logger=logging.getLogger("app.i18n"),
        ... )
        >>> config.miss_policy
        <MissPolicy.RETURN_EMPTY: 'return_empty'>
    """

    default_lang: str = DEFAULT_LANGUAGE
    fallback_lang: str = DEFAULT_LANGUAGE
    miss_handler: MissHandler | None = None
    miss_policy: MissPolicy = MissPolicy.RETURN_ID
    logger: logging.Logger | None = None
    cache_size: int = MAX_RESOLVER_CACHE_SIZE

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If a language setting is empty, the miss policy is
                unknown, or cache_size is not positive.
        """
        if not self.default_lang:
            msg = "default_lang must not be empty"
            raise ValueError(msg)
        if not self.fallback_lang:
            msg = "fallback_lang must not be empty"
            raise ValueError(msg)
        if self.cache_size <= 0:
            msg = "cache_size must be positive"
            raise ValueError(msg)
        # Accept the raw string value ("return_empty") as well as the member
        object.__setattr__(self, "miss_policy", MissPolicy(self.miss_policy))

"""Thread-safe LRU cache of per-language resolvers.

A Resolver is cheap to build but is requested on every translate() call, so
each Bundle keeps the most recently used ones keyed by canonical language tag.

Architecture:
    - Thread-safe using threading.RLock (reentrant lock)
    - LRU eviction via OrderedDict
    - Cleared by the owning Bundle on every load and fallback change

Concurrent misses for the same language may build two resolvers; both are
equivalent and the last put() wins.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from threading import RLock
from typing import TYPE_CHECKING

from langbundle.constants import MAX_RESOLVER_CACHE_SIZE

if TYPE_CHECKING:
    from langbundle.catalog.types import LanguageTag
    from langbundle.runtime.resolver import Resolver

__all__ = ["ResolverCache"]

logger = logging.getLogger(__name__)


class ResolverCache:
    """LRU map of canonical language tag -> Resolver.

    Returns None on a miss; building is the caller's job.

    Attributes:
        maxsize: Maximum number of cached resolvers
        hits: Number of cache hits (for metrics)
        misses: Number of cache misses (for metrics)
    """

    __slots__ = ("_cache", "_hits", "_lock", "_maxsize", "_misses")

    def __init__(self, maxsize: int = MAX_RESOLVER_CACHE_SIZE) -> None:
        """Initialize resolver cache.

        Args:
            maxsize: Maximum number of entries (default: 128)
        """
        if maxsize <= 0:
            msg = "maxsize must be positive"
            raise ValueError(msg)

        self._cache: OrderedDict[LanguageTag, Resolver] = OrderedDict()
        self._maxsize = maxsize
        self._lock = RLock()
        self._hits = 0
        self._misses = 0

    def get(self, language: LanguageTag) -> Resolver | None:
        """Get the cached resolver for a language, or None."""
        with self._lock:
            resolver = self._cache.get(language)
            if resolver is None:
                self._misses += 1
                return None
            self._cache.move_to_end(language)
            self._hits += 1
            return resolver

    def put(self, language: LanguageTag, resolver: Resolver) -> None:
        """Store a resolver, evicting the least recently used entry if full."""
        with self._lock:
            if language in self._cache:
                self._cache.move_to_end(language)
            elif len(self._cache) >= self._maxsize:
                evicted, _ = self._cache.popitem(last=False)
                logger.debug("Resolver cache full, evicted %s", evicted)
            self._cache[language] = resolver

    def clear(self) -> None:
        """Drop every cached resolver and reset metrics."""
        with self._lock:
            dropped = len(self._cache)
            self._cache.clear()
            self._hits = 0
            self._misses = 0
        if dropped:
            logger.debug("Resolver cache cleared (%d entries)", dropped)

    def get_stats(self) -> dict[str, int | float]:
        """Get cache statistics.

        Returns:
            Dict with keys:
            - size (int): Current number of cached resolvers
            - maxsize (int): Maximum cache capacity
            - hits (int): Number of cache hits
            - misses (int): Number of cache misses
            - hit_rate (float): Hit rate as percentage (0.0-100.0)
        """
        with self._lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0
            return {
                "size": len(self._cache),
                "maxsize": self._maxsize,
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": round(hit_rate, 2),
            }

    def __contains__(self, language: object) -> bool:
        """Check presence without touching LRU order or metrics."""
        with self._lock:
            return language in self._cache

    def __len__(self) -> int:
        """Number of cached resolvers."""
        with self._lock:
            return len(self._cache)

    @property
    def maxsize(self) -> int:
        """Maximum cache size."""
        return self._maxsize

    @property
    def hits(self) -> int:
        """Number of cache hits."""
        with self._lock:
            return self._hits

    @property
    def misses(self) -> int:
        """Number of cache misses."""
        with self._lock:
            return self._misses

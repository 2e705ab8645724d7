"""Locale-keyed cache of probed locale symbols.

Probing a locale costs eleven formatter calls; the result never changes for
the lifetime of the process. LocaleCodeCache keeps one immutable LocaleCodes
per normalized locale code.

Architecture:
    - Thread-safe using RWLock: lookups share the lock, insertions are
      exclusive
    - Double-checked insertion: probing happens outside the lock, and the
      first writer for a locale wins
    - Oldest-first eviction via OrderedDict once maxsize is reached (hits do
      not reorder entries, since they only hold the shared lock)

Python 3.13+.
"""

import logging
import threading
from collections import OrderedDict
from collections.abc import Callable

from l10nkit.constants import MAX_LOCALE_CACHE_SIZE
from l10nkit.core.rwlock import RWLock
from l10nkit.validation.codes import LocaleCodes

__all__ = ["LocaleCodeCache"]

logger = logging.getLogger(__name__)


class LocaleCodeCache:
    """Thread-safe cache of LocaleCodes keyed by normalized locale code.

    Attributes:
        maxsize: Maximum number of cached locales
        hits: Number of lookups served from the cache
        misses: Number of lookups that required probing
    """

    __slots__ = ("_entries", "_hits", "_lock", "_maxsize", "_misses", "_stats_lock")

    def __init__(self, maxsize: int = MAX_LOCALE_CACHE_SIZE) -> None:
        """Initialize locale code cache.

        Args:
            maxsize: Maximum number of entries (default: MAX_LOCALE_CACHE_SIZE)

        Raises:
            ValueError: If maxsize is not positive
        """
        if maxsize <= 0:
            msg = "maxsize must be positive"
            raise ValueError(msg)

        self._entries: OrderedDict[str, LocaleCodes] = OrderedDict()
        self._maxsize = maxsize
        self._lock = RWLock()
        self._stats_lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get(self, locale_key: str) -> LocaleCodes | None:
        """Get cached codes, or None on a miss."""
        with self._lock.read():
            entry = self._entries.get(locale_key)
        with self._stats_lock:
            if entry is None:
                self._misses += 1
            else:
                self._hits += 1
        return entry

    def put(self, locale_key: str, codes: LocaleCodes) -> LocaleCodes:
        """Store codes unless another thread stored them first.

        Returns:
            The entry now in the cache (the existing one if there was one)
        """
        with self._lock.write():
            existing = self._entries.get(locale_key)
            if existing is not None:
                return existing
            if len(self._entries) >= self._maxsize:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Evicted locale codes for %s", evicted)
            self._entries[locale_key] = codes
            return codes

    def get_or_create(self, locale_key: str, factory: Callable[[], LocaleCodes]) -> LocaleCodes:
        """Return cached codes, probing with factory on a miss.

        Concurrent misses for the same locale may each run factory; all of
        them receive the entry stored by the first writer.
        """
        entry = self.get(locale_key)
        if entry is not None:
            return entry
        return self.put(locale_key, factory())

    def clear(self) -> None:
        """Drop every entry and reset metrics."""
        with self._lock.write():
            self._entries.clear()
        with self._stats_lock:
            self._hits = 0
            self._misses = 0

    def get_stats(self) -> dict[str, int | float]:
        """Get cache statistics.

        Returns:
            Dict with keys size, maxsize, hits, misses and hit_rate
            (percentage, 0.0-100.0)
        """
        size = len(self)
        with self._stats_lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0
            return {
                "size": size,
                "maxsize": self._maxsize,
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": round(hit_rate, 2),
            }

    def __contains__(self, locale_key: object) -> bool:
        with self._lock.read():
            return locale_key in self._entries

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._entries)

    @property
    def maxsize(self) -> int:
        """Maximum cache size."""
        return self._maxsize

    @property
    def hits(self) -> int:
        """Number of cache hits."""
        with self._stats_lock:
            return self._hits

    @property
    def misses(self) -> int:
        """Number of cache misses."""
        with self._stats_lock:
            return self._misses

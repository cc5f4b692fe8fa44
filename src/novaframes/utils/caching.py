"""Per-thread single-slot memoization for the series evaluators.

Evaluating the nutation and complementary-terms series is expensive, and
consecutive calls overwhelmingly ask for the same epoch. Each expensive
function therefore owns a :class:`SingleSlotCache`: one remembered
``(key, value)`` pair per thread.

Keys are compared exactly. A slot answers only for the very inputs it was
filled with; any other key is a miss and the slot is refilled, so a cached
value can never be stale. Slots live in :class:`threading.local` storage,
so concurrent threads neither share nor overwrite each other's entries.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Hashable, NamedTuple

logger = logging.getLogger(__name__)

_MISSING = object()

_registry: list[SingleSlotCache] = []
_registry_lock = threading.Lock()


class CacheStats(NamedTuple):
    """Hit and miss counts of one cache for the calling thread."""

    hits: int
    misses: int


class SingleSlotCache:
    """A thread-local cache remembering the most recent result only.

    Args:
        name: Label used in log messages.

    Example:
        ```python
        _cache = SingleSlotCache("mean_obliq")

        hit, value = _cache.lookup(jd)
        if not hit:
            value = _cache.store(jd, compute(jd))
        ```
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._local = threading.local()
        with _registry_lock:
            _registry.append(self)

    def _slot(self) -> threading.local:
        local = self._local
        if not hasattr(local, "key"):
            local.key = _MISSING
            local.value = None
            local.hits = 0
            local.misses = 0
        return local

    def lookup(self, key: Hashable) -> tuple[bool, Any]:
        """Return ``(True, value)`` if *key* is the remembered key.

        Args:
            key: Exact lookup key.

        Returns:
            ``(hit, value)``; *value* is ``None`` on a miss.
        """
        slot = self._slot()
        if slot.key is not _MISSING and slot.key == key:
            slot.hits += 1
            return True, slot.value
        slot.misses += 1
        logger.debug("%s: cache miss for %r", self.name, key)
        return False, None

    def store(self, key: Hashable, value: Any) -> Any:
        """Replace the slot content and return *value*."""
        slot = self._slot()
        slot.key = key
        slot.value = value
        return value

    def clear(self) -> None:
        """Empty the slot and reset the statistics of the calling thread."""
        slot = self._slot()
        slot.key = _MISSING
        slot.value = None
        slot.hits = 0
        slot.misses = 0

    def stats(self) -> CacheStats:
        """Return the hit/miss counts of the calling thread."""
        slot = self._slot()
        return CacheStats(slot.hits, slot.misses)


def clear_all() -> None:
    """Clear every :class:`SingleSlotCache` for the calling thread."""
    with _registry_lock:
        caches = list(_registry)
    for cache in caches:
        cache.clear()

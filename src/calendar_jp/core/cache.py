"""
Per-year memoization of expanded holiday maps.

Architecture:
    ::

        YearCache  — owned by one CalendarJp instance, bounded LRU

        API: get(year) → map | None
             set(year, map)
             clear()

The cache holds derived, recomputable state only. It is cleared entirely
whenever the rule table changes; there is no per-year invalidation.

Examples:
    >>> cache = YearCache(max_size=4)
    >>> cache.set(2024, {"2024-01-01": "元日"})
    >>> cache.get(2024)
    {'2024-01-01': '元日'}
    >>> cache.clear()
    >>> cache.get(2024) is None
    True
"""

from __future__ import annotations

from typing import Any


class YearCache:
    """Bounded in-memory cache keyed by year.

    Uses LRU eviction when ``max_size`` is reached. Not synchronized; the
    owning calendar serializes access.

    Attributes:
        max_size: Maximum number of cached years before LRU eviction.
    """

    def __init__(self, *, max_size: int = 256):
        self._store: dict[int, Any] = {}
        self._access_order: list[int] = []
        self._max_size = max_size

    def get(self, year: int) -> Any | None:
        """Retrieve the cached map for a year."""
        if year not in self._store:
            return None

        if year in self._access_order:
            self._access_order.remove(year)
        self._access_order.append(year)

        return self._store[year]

    def set(self, year: int, value: Any) -> None:
        """Store the map for a year, evicting the least recently used year if full."""
        if year not in self._store and len(self._store) >= self._max_size:
            if self._access_order:
                lru_year = self._access_order.pop(0)
                self._store.pop(lru_year, None)

        self._store[year] = value

        if year in self._access_order:
            self._access_order.remove(year)
        self._access_order.append(year)

    def clear(self) -> None:
        """Remove all cached years."""
        self._store.clear()
        self._access_order.clear()

    def size(self) -> int:
        """Return current number of cached years."""
        return len(self._store)

    def years(self) -> list[int]:
        """Cached years, least recently used first."""
        return list(self._access_order)

"""
Small keyed cache with lazy expiry.

Entries are replaced wholesale on ``put`` and never mutated. Nothing is
evicted: an entry older than the TTL is simply ignored by ``get`` until the
next successful ``put`` replaces it.
"""

from typing import Generic, Hashable, Optional, TypeVar

from ..data.models import CacheEntry
from ..utils.time import Clock, now_ms

T = TypeVar("T")

SINGLETON_KEY = "__singleton__"


class TTLCache(Generic[T]):
    """Mapping of key to ``CacheEntry`` with a fixed TTL in milliseconds."""

    def __init__(self, ttl_ms: int, clock: Clock = now_ms):
        self.ttl_ms = ttl_ms
        self.clock = clock
        self._entries: dict[Hashable, CacheEntry[T]] = {}

    def get(self, key: Hashable = SINGLETON_KEY) -> Optional[T]:
        """Cached value if present and fresh, otherwise None."""
        entry = self._entries.get(key)
        if entry is None or not entry.is_fresh(self.clock(), self.ttl_ms):
            return None
        return entry.value

    def put(self, value: T, key: Hashable = SINGLETON_KEY) -> CacheEntry[T]:
        """Store ``value`` stamped with the current time, replacing any entry."""
        entry = CacheEntry(value=value, fetched_at=self.clock())
        self._entries[key] = entry
        return entry

    def entry(self, key: Hashable = SINGLETON_KEY) -> Optional[CacheEntry[T]]:
        """Raw entry regardless of freshness."""
        return self._entries.get(key)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: Hashable) -> bool:
        return self.get(key) is not None

    def __len__(self) -> int:
        return len(self._entries)

"""In-memory cache stores."""

import asyncio
import threading
from collections import OrderedDict
from collections.abc import Callable

from stampede.early_expiry import now_ms
from stampede.types import CacheEntry

_Slot = tuple[CacheEntry[object], int]  # (entry, evict_at ms)


class _MemoryBackend:
    """Shared bookkeeping for the memory stores. Callers hold the lock."""

    def __init__(
        self, max_items: int | None, clock: Callable[[], int] | None
    ) -> None:
        if max_items is not None and max_items <= 0:
            raise ValueError("max_items must be positive")
        self._cache: OrderedDict[str, _Slot] = OrderedDict()
        self._max_items = max_items
        self._clock = clock or now_ms

    def get(self, key: str) -> CacheEntry[object] | None:
        slot = self._cache.get(key)
        if slot is None:
            return None
        entry, evict_at = slot
        if self._clock() >= evict_at:
            del self._cache[key]
            return None
        self._cache.move_to_end(key)  # LRU touch
        return entry

    def set(self, key: str, entry: CacheEntry[object], ttl: int) -> None:
        self._cache[key] = (entry, self._clock() + ttl)
        self._cache.move_to_end(key)
        if self._max_items and len(self._cache) > self._max_items:
            self._cache.popitem(last=False)

    def delete(self, key: str) -> None:
        self._cache.pop(key, None)

    def clear(self) -> None:
        self._cache.clear()


class MemoryStore:
    """Thread-safe in-memory store with per-key TTL and optional LRU eviction."""

    def __init__(
        self,
        max_items: int | None = None,
        *,
        clock: Callable[[], int] | None = None,
    ) -> None:
        self._backend = _MemoryBackend(max_items, clock)
        self._lock = threading.Lock()

    def get(self, key: str) -> CacheEntry[object] | None:
        """Get a cache entry by key, or None if absent or evicted."""
        with self._lock:
            return self._backend.get(key)

    def set(self, key: str, entry: CacheEntry[object], ttl: int) -> None:
        """Store a cache entry for ``ttl`` ms."""
        with self._lock:
            self._backend.set(key, entry, ttl)

    def delete(self, key: str) -> None:
        """Delete a cache entry."""
        with self._lock:
            self._backend.delete(key)

    def clear(self) -> None:
        """Clear all cached entries."""
        with self._lock:
            self._backend.clear()


class AsyncMemoryStore:
    """Async in-memory store with per-key TTL and optional LRU eviction."""

    def __init__(
        self,
        max_items: int | None = None,
        *,
        clock: Callable[[], int] | None = None,
    ) -> None:
        self._backend = _MemoryBackend(max_items, clock)
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> CacheEntry[object] | None:
        """Get a cache entry by key, or None if absent or evicted."""
        async with self._lock:
            return self._backend.get(key)

    async def set(self, key: str, entry: CacheEntry[object], ttl: int) -> None:
        """Store a cache entry for ``ttl`` ms."""
        async with self._lock:
            self._backend.set(key, entry, ttl)

    async def delete(self, key: str) -> None:
        """Delete a cache entry."""
        async with self._lock:
            self._backend.delete(key)

    async def clear(self) -> None:
        """Clear all cached entries."""
        async with self._lock:
            self._backend.clear()

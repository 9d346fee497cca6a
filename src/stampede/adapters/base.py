"""Base store protocols for cache backends."""

from typing import Protocol, runtime_checkable

from stampede.types import CacheEntry


@runtime_checkable
class CacheStore(Protocol):
    """Sync cache store interface."""

    def get(self, key: str) -> CacheEntry[object] | None:
        """Get a cache entry by key."""
        ...

    def set(self, key: str, entry: CacheEntry[object], ttl: int) -> None:
        """Store a cache entry that the backend keeps for ``ttl`` ms."""
        ...


@runtime_checkable
class AsyncCacheStore(Protocol):
    """Async cache store interface."""

    async def get(self, key: str) -> CacheEntry[object] | None:
        """Get a cache entry by key."""
        ...

    async def set(self, key: str, entry: CacheEntry[object], ttl: int) -> None:
        """Store a cache entry that the backend keeps for ``ttl`` ms."""
        ...

"""Redis cache stores."""

from __future__ import annotations

import redis
import redis.asyncio

from stampede.codec import EntryCodec, JsonCodec
from stampede.types import CacheEntry


class RedisStore:
    """Sync Redis cache store."""

    def __init__(
        self,
        client: redis.Redis,
        *,
        prefix: str = "stampede",
        codec: EntryCodec | None = None,
    ) -> None:
        self._client = client
        self._prefix = prefix
        self._codec = codec or JsonCodec()

    def _entry_key(self, key: str) -> str:
        """Generate full Redis key for cache entries."""
        return f"{self._prefix}:entry:{key}"

    def get(self, key: str) -> CacheEntry[object] | None:
        """Get a cache entry by key."""
        data = self._client.get(self._entry_key(key))
        if data is None:
            return None
        return self._codec.decode(data)

    def set(self, key: str, entry: CacheEntry[object], ttl: int) -> None:
        """Store a cache entry that Redis expires after ``ttl`` ms."""
        # PX rejects 0, keep the key for at least a millisecond
        self._client.set(
            self._entry_key(key), self._codec.encode(entry), px=max(ttl, 1)
        )

    def delete(self, key: str) -> None:
        """Delete a cache entry."""
        self._client.delete(self._entry_key(key))

    def disconnect(self) -> None:
        """Close the Redis connection."""
        self._client.close()


class AsyncRedisStore:
    """Async Redis cache store."""

    def __init__(
        self,
        client: redis.asyncio.Redis,
        *,
        prefix: str = "stampede",
        codec: EntryCodec | None = None,
    ) -> None:
        self._client = client
        self._prefix = prefix
        self._codec = codec or JsonCodec()

    def _entry_key(self, key: str) -> str:
        """Generate full Redis key for cache entries."""
        return f"{self._prefix}:entry:{key}"

    async def get(self, key: str) -> CacheEntry[object] | None:
        """Get a cache entry by key."""
        data = await self._client.get(self._entry_key(key))
        if data is None:
            return None
        return self._codec.decode(data)

    async def set(self, key: str, entry: CacheEntry[object], ttl: int) -> None:
        """Store a cache entry that Redis expires after ``ttl`` ms."""
        await self._client.set(
            self._entry_key(key), self._codec.encode(entry), px=max(ttl, 1)
        )

    async def delete(self, key: str) -> None:
        """Delete a cache entry."""
        await self._client.delete(self._entry_key(key))

    async def disconnect(self) -> None:
        """Close the Redis connection."""
        await self._client.aclose()

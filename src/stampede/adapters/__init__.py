"""Cache store adapters."""

from contextlib import suppress

from stampede.adapters.base import AsyncCacheStore, CacheStore
from stampede.adapters.memory import AsyncMemoryStore, MemoryStore

# Optional adapters - only available when dependencies are installed
with suppress(ImportError):
    from stampede.adapters.redis import AsyncRedisStore, RedisStore

__all__ = [
    "AsyncCacheStore",
    "AsyncMemoryStore",
    "AsyncRedisStore",
    "CacheStore",
    "MemoryStore",
    "RedisStore",
]

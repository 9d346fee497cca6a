"""stampede - Probabilistic early expiration for shared caches."""

from contextlib import suppress

# Stores
from stampede.adapters import (
    AsyncCacheStore,
    AsyncMemoryStore,
    CacheStore,
    MemoryStore,
)

# Guards
from stampede.async_guard import AsyncStampedeGuard
from stampede.codec import EntryCodec, EntryDecodeError, JsonCodec

# Duration parsing
from stampede.duration import parse_duration
from stampede.guard import StampedeGuard
from stampede.sampling import FixedSampler, RandomSampler, Sampler
from stampede.source import (
    AsyncDataSource,
    AsyncFunctionSource,
    DataSource,
    FunctionSource,
)

# Core types
from stampede.types import CacheEntry, Duration

# Optional store imports - only available when dependencies are installed
with suppress(ImportError):
    from stampede.adapters import AsyncRedisStore, RedisStore

__version__ = "0.1.0"

__all__ = [
    "AsyncCacheStore",
    "AsyncDataSource",
    "AsyncFunctionSource",
    "AsyncMemoryStore",
    "AsyncRedisStore",
    "AsyncStampedeGuard",
    "CacheEntry",
    "CacheStore",
    "DataSource",
    "Duration",
    "EntryCodec",
    "EntryDecodeError",
    "FixedSampler",
    "FunctionSource",
    "JsonCodec",
    "MemoryStore",
    "RandomSampler",
    "RedisStore",
    "Sampler",
    "StampedeGuard",
    "parse_duration",
]

"""Async stampede guard."""

import logging
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Generic, ParamSpec, TypeVar, cast

from stampede.adapters.base import AsyncCacheStore
from stampede.duration import parse_duration
from stampede.early_expiry import check_beta, is_fresh, now_ms, storage_ttl
from stampede.guard import make_cache_key
from stampede.sampling import RandomSampler, Sampler
from stampede.source import AsyncDataSource
from stampede.types import CacheEntry, Duration

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")
T = TypeVar("T")


class AsyncStampedeGuard(Generic[T]):
    """Async cache reader with probabilistic early recomputation."""

    def __init__(
        self,
        store: AsyncCacheStore,
        source: AsyncDataSource[T] | None = None,
        *,
        beta: float = 1.0,
        sampler: Sampler | None = None,
        clock: Callable[[], int] | None = None,
    ) -> None:
        self._store = store
        self._source = source
        self._beta = check_beta(beta)
        self._sampler = sampler or RandomSampler()
        self._clock = clock or now_ms

    async def fetch(
        self,
        id: int,
        cache_key: str,
        ttl: Duration,
        beta: float | None = None,
    ) -> T:
        """Read ``cache_key``, recomputing from the data source when due."""
        source = self._source
        if source is None:
            raise RuntimeError("fetch() needs a data source, use query() instead")
        return await self.query(
            key=cache_key, fn=lambda: source.read(id), ttl=ttl, beta=beta
        )

    async def query(
        self,
        *,
        key: str,
        fn: Callable[[], Awaitable[R]],
        ttl: Duration,
        beta: float | None = None,
    ) -> R:
        """Read ``key``, recomputing with ``fn`` when the entry is due.

        Args:
            key: Cache key
            fn: Async function producing a fresh value
            ttl: Logical time to live of a recomputed value
            beta: Early expiration coefficient (default: guard default)

        Returns:
            Cached or fresh data
        """
        ttl_ms = parse_duration(ttl)
        beta = self._beta if beta is None else check_beta(beta)

        entry = await self._read(key)
        if entry is not None:
            if is_fresh(entry, self._clock(), beta, self._sampler()):
                logger.debug("Cache hit for %s", key)
                return cast(R, entry.value)
            logger.debug("Early recompute for %s", key)
        else:
            logger.debug("Cache miss for %s", key)

        start = self._clock()
        value = await fn()
        delta = max(0, self._clock() - start)

        new_entry: CacheEntry[object] = CacheEntry(
            value=value,
            compute_duration_ms=delta,
            expires_at=self._clock() + ttl_ms,
        )
        await self._write(
            key, new_entry, storage_ttl(ttl_ms, new_entry.expires_at, self._clock())
        )
        return value

    def cached(
        self,
        *,
        ttl: Duration,
        beta: float | None = None,
        prefix: str = "stampede",
    ) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
        """Decorator that routes calls through query(), keyed by arguments."""
        parse_duration(ttl)  # Fail at decoration time
        if beta is not None:
            check_beta(beta)

        def decorator(fn: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
            @wraps(fn)
            async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
                key = make_cache_key(prefix, fn.__qualname__, args, kwargs)
                return await self.query(
                    key=key, fn=lambda: fn(*args, **kwargs), ttl=ttl, beta=beta
                )

            return wrapper

        return decorator

    async def _read(self, key: str) -> CacheEntry[object] | None:
        """Get an entry, treating any store or decode failure as a miss."""
        try:
            return await self._store.get(key)
        except Exception:
            logger.warning("Cache read failed for %s", key, exc_info=True)
            return None

    async def _write(self, key: str, entry: CacheEntry[object], ttl: int) -> None:
        """Store an entry, logging instead of raising on failure."""
        try:
            await self._store.set(key, entry, ttl)
        except Exception:
            logger.warning("Cache write failed for %s", key, exc_info=True)

"""Probabilistic early expiration (XFetch).

Each hit on a cached entry recomputes early with a probability that rises
as the logical expiry approaches, scaled by how long the last recompute took.
Based on Vattani, Chierichetti & Lowenstein (2015), Optimal Probabilistic
Cache Stampede Prevention, VLDB.
"""

import math
import time

from stampede.sampling import check_sample
from stampede.types import CacheEntry


def now_ms() -> int:
    """Current Unix time in milliseconds."""
    return int(time.time() * 1000)


def check_beta(beta: float) -> float:
    """Return ``beta`` if it is a valid coefficient, else raise ValueError."""
    if beta < 0:
        raise ValueError(f"beta must be non-negative: {beta!r}")
    return beta


def is_fresh(entry: CacheEntry[object], now: int, beta: float, u: float) -> bool:
    """Check whether ``entry`` can be served instead of recomputing.

    Args:
        entry: The cached entry
        now: Current Unix time in ms
        beta: Early expiration coefficient, higher refreshes earlier
        u: Uniform sample in (0, 1], drawn fresh for every check

    Returns:
        True if ``now - delta * beta * ln(u)`` is still before the expiry
    """
    check_sample(u)
    threshold = now - entry.compute_duration_ms * beta * math.log(u)
    return threshold < entry.expires_at


def storage_ttl(ttl: int, expires_at: int, now: int) -> int:
    """TTL for the backend write.

    The backend keeps the entry past its logical expiry by the remaining
    logical lifetime, so late readers still find it when they lose the
    early expiration draw.
    """
    return ttl + (expires_at - now)

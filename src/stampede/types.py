"""Core types for the stampede cache guard."""

from dataclasses import dataclass
from datetime import timedelta
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class CacheEntry(Generic[T]):
    """A cached value with the metadata needed for early expiration."""

    value: T
    compute_duration_ms: int  # How long the last recompute took
    expires_at: int  # Unix timestamp ms, logical expiration

    def __post_init__(self) -> None:
        if self.compute_duration_ms < 0:
            raise ValueError("compute_duration_ms must be non-negative")


# Duration type alias
Duration = str | int | timedelta  # "30s", "5m", "2h", "1d", ms or timedelta

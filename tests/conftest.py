"""Shared pytest fixtures."""

import pytest

from stampede import AsyncMemoryStore, CacheEntry, MemoryStore

START_MS = 1_700_000_000_000


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, now: int = START_MS) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


class RecordingStore:
    """Store that serves a fixed entry and records every write."""

    def __init__(self, entry: CacheEntry[object] | None = None) -> None:
        self.entry = entry
        self.writes: list[tuple[str, CacheEntry[object], int]] = []

    def get(self, key: str) -> CacheEntry[object] | None:
        return self.entry

    def set(self, key: str, entry: CacheEntry[object], ttl: int) -> None:
        self.writes.append((key, entry, ttl))


@pytest.fixture
def clock() -> FakeClock:
    """Create a fake clock starting at a fixed instant."""
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> MemoryStore:
    """Create a fresh MemoryStore driven by the fake clock."""
    return MemoryStore(clock=clock)


@pytest.fixture
def async_store(clock: FakeClock) -> AsyncMemoryStore:
    """Create a fresh AsyncMemoryStore driven by the fake clock."""
    return AsyncMemoryStore(clock=clock)

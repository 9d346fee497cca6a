"""Tests for package exports."""

import importlib
import sys

import pytest


def test_public_api_available() -> None:
    """Test that the public API is importable from the package root."""
    from stampede import (
        AsyncMemoryStore,
        AsyncStampedeGuard,
        CacheEntry,
        FixedSampler,
        JsonCodec,
        MemoryStore,
        RandomSampler,
        StampedeGuard,
        parse_duration,
    )

    # Just verify they're importable
    assert StampedeGuard is not None
    assert AsyncStampedeGuard is not None
    assert MemoryStore is not None
    assert AsyncMemoryStore is not None
    assert CacheEntry is not None
    assert JsonCodec is not None
    assert RandomSampler is not None
    assert FixedSampler is not None
    assert parse_duration is not None


def test_redis_exports_with_dependency() -> None:
    """Test that Redis stores are exported when redis is installed."""
    pytest.importorskip("redis")
    from stampede import AsyncRedisStore, RedisStore

    assert RedisStore is not None
    assert AsyncRedisStore is not None


def test_package_imports_without_redis(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that a missing redis dependency only hides the Redis stores."""
    import stampede.adapters

    monkeypatch.setitem(sys.modules, "redis", None)
    monkeypatch.setitem(sys.modules, "redis.asyncio", None)
    monkeypatch.delitem(sys.modules, "stampede.adapters.redis", raising=False)
    monkeypatch.delattr(stampede.adapters, "RedisStore", raising=False)
    monkeypatch.delattr(stampede.adapters, "AsyncRedisStore", raising=False)
    try:
        adapters = importlib.reload(stampede.adapters)
        assert not hasattr(adapters, "RedisStore")
        assert not hasattr(adapters, "AsyncRedisStore")
        assert adapters.MemoryStore is not None
    finally:
        monkeypatch.undo()
        importlib.reload(stampede.adapters)

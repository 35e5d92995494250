"""
cache-bridge — Cache Factory Integration Tests

Tests the factory that creates and manages cache instances: backend
selection, registry behaviour, item pools and lifecycle management.
"""

from collections.abc import Generator
from unittest.mock import MagicMock

import pytest

from cache_bridge.cache import factory
from cache_bridge.cache.adapters.pool import SimpleToItemPoolAdapter
from cache_bridge.cache.adapters.simple import ItemPoolToSimpleAdapter
from cache_bridge.cache.backends.memory import MemoryCacheBackend
from cache_bridge.cache.backends.memory_pool import MemoryCachePool
from cache_bridge.cache.factory import (
    close_all_caches,
    create_cache,
    create_item_pool,
    get_cache,
    list_cache_instances,
    reset_cache_factory,
)
from cache_bridge.cache.interface import CacheItemPoolInterface, SimpleCacheInterface
from cache_bridge.config import CacheBackend, CacheConfig
from cache_bridge.errors import ConfigurationError


class TestCacheFactory:
    """Test suite for cache factory functionality."""

    @pytest.fixture(autouse=True)
    def cleanup(self, mock_env_memory: None) -> Generator[None, None, None]:
        """Run against the memory backend and clean up cache instances after each test."""
        yield
        close_all_caches()
        reset_cache_factory()

    def test_create_memory_cache_default(self, mock_env_memory: None) -> None:
        """Test creating a memory cache with environment configuration."""
        cache = create_cache()

        assert isinstance(cache, SimpleCacheInterface)
        assert isinstance(cache, MemoryCacheBackend)
        assert cache.namespace == "test"

        cache.set("test_key", "test_value")
        assert cache.get("test_key") == "test_value"

    def test_create_memory_cache_explicit_config(self) -> None:
        """Test creating a memory cache with explicit configuration."""
        config = CacheConfig(backend=CacheBackend.MEMORY, namespace="test_ns", ttl_seconds=1800)

        cache = create_cache(config=config, name="custom")

        assert isinstance(cache, MemoryCacheBackend)
        assert cache.default_ttl == 1800
        assert cache.namespace == "test_ns"

    def test_create_memory_pool_backend(self) -> None:
        """The memory_pool backend is an item pool behind the simple adapter."""
        config = CacheConfig(backend=CacheBackend.MEMORY_POOL, namespace="pooled")

        cache = create_cache(config=config, name="pooled")

        assert isinstance(cache, ItemPoolToSimpleAdapter)
        assert isinstance(cache.pool, MemoryCachePool)
        assert cache.pool.namespace == "pooled"

        assert cache.set("key", None) is True
        assert cache.has("key") is True

    def test_memory_pool_backend_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CACHE_BACKEND", "memory_pool")

        assert isinstance(create_cache(), ItemPoolToSimpleAdapter)

    def test_create_item_pool_unwraps_adapted_pool(self) -> None:
        config = CacheConfig(backend=CacheBackend.MEMORY_POOL)

        cache = create_cache(config=config, name="pooled")
        pool = create_item_pool(name="pooled")

        assert isinstance(pool, MemoryCachePool)
        assert pool is cache.pool  # type: ignore[attr-defined]

    def test_unknown_backend_rejected(self) -> None:
        with pytest.raises(ValueError):
            CacheConfig(backend="memcached")  # type: ignore[arg-type]

    def test_unknown_backend_checked_by_factory(self) -> None:
        config = CacheConfig.model_construct(backend="memcached", namespace="x", ttl_seconds=0)

        with pytest.raises(ConfigurationError) as exc_info:
            create_cache(config=config, name="broken")
        assert exc_info.value.details["supported"] == ["memory", "memory_pool"]
        assert "broken" not in list_cache_instances()

    def test_singleton_behavior(self) -> None:
        """Test that factory returns the same instance for the same name."""
        cache1 = create_cache(name="singleton_test")
        cache2 = create_cache(name="singleton_test")

        assert cache1 is cache2

    def test_multiple_named_instances(self) -> None:
        """Test creating multiple named cache instances."""
        cache1 = create_cache(name="cache1")
        cache2 = create_cache(name="cache2")

        assert cache1 is not cache2
        assert set(list_cache_instances()) == {"cache1", "cache2"}

    def test_get_cache_creates_on_demand(self, mock_env_memory: None) -> None:
        cache = get_cache("lazy")

        assert get_cache("lazy") is cache
        assert "lazy" in list_cache_instances()

    def test_create_item_pool_shares_storage(self) -> None:
        cache = create_cache(name="shared")
        pool = create_item_pool(name="shared")

        assert isinstance(pool, CacheItemPoolInterface)
        assert isinstance(pool, SimpleToItemPoolAdapter)
        assert pool.cache is cache

        cache.set("key", "value")
        assert pool.get_item("key").get() == "value"

    def test_close_all_caches(self) -> None:
        cache = create_cache(name="to_close")
        cache.close = MagicMock()  # type: ignore[method-assign]

        close_all_caches()

        cache.close.assert_called_once_with()
        assert list_cache_instances() == []

    def test_close_all_caches_continues_after_error(self) -> None:
        failing = create_cache(name="failing")
        healthy = create_cache(name="healthy")
        failing.close = MagicMock(side_effect=RuntimeError("boom"))  # type: ignore[method-assign]
        healthy.close = MagicMock()  # type: ignore[method-assign]

        close_all_caches()

        healthy.close.assert_called_once_with()
        assert factory._cache_instances == {}

    def test_reset_does_not_close(self) -> None:
        cache = create_cache(name="kept_open")
        cache.close = MagicMock()  # type: ignore[method-assign]

        reset_cache_factory()

        cache.close.assert_not_called()
        assert list_cache_instances() == []

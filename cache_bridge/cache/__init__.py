"""
cache-bridge — Cache Module

Two cache contracts and the adapters between them.

- interface.py: SimpleCacheInterface and CacheItemPoolInterface
- item.py: CacheItem produced by item pools
- adapters/: ItemPoolToSimpleAdapter and SimpleToItemPoolAdapter
- backends/: bundled in-memory implementations of both contracts
- factory.py: configuration-driven construction

Usage:
    from cache_bridge.cache import ItemPoolToSimpleAdapter, MemoryCachePool

    cache = ItemPoolToSimpleAdapter(MemoryCachePool())
    cache.set("key", "value", ttl=3600)
    value = cache.get("key")
"""

from .adapters import ItemPoolToSimpleAdapter, SimpleToItemPoolAdapter
from .backends import MemoryCacheBackend, MemoryCachePool
from .factory import (
    close_all_caches,
    create_cache,
    create_item_pool,
    get_cache,
    list_cache_instances,
    reset_cache_factory,
)
from .interface import CacheItemPoolInterface, SimpleCacheInterface
from .item import CacheItem

__all__ = [
    # Contracts
    "SimpleCacheInterface",
    "CacheItemPoolInterface",
    "CacheItem",
    # Adapters
    "ItemPoolToSimpleAdapter",
    "SimpleToItemPoolAdapter",
    # Backends
    "MemoryCacheBackend",
    "MemoryCachePool",
    # Factory functions
    "create_cache",
    "create_item_pool",
    "get_cache",
    "close_all_caches",
    "list_cache_instances",
    "reset_cache_factory",
]

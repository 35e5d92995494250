"""
cache-bridge — Cache Factory

Factory for creating cache instances based on configuration.

Key points:
- Backend selected with CACHE_BACKEND=memory|memory_pool (memory by default)
- memory: MemoryCacheBackend, a native simple key-value store
- memory_pool: MemoryCachePool behind ItemPoolToSimpleAdapter
- create_cache() returns the simple key-value contract
- create_item_pool() returns the item-pool contract over the same named cache
- All configuration is typed and validated via Pydantic models

Examples:
    from cache_bridge.cache.factory import create_cache, create_item_pool

    cache = create_cache()
    pool = create_item_pool()

    from cache_bridge.config import CacheBackend, CacheConfig
    cfg = CacheConfig(backend=CacheBackend.MEMORY, ttl_seconds=600)
    mem_cache = create_cache(cfg, name="test")
"""

from __future__ import annotations

import logging

from ..config import CacheBackend, CacheConfig, get_config
from ..errors import ConfigurationError
from .adapters.pool import SimpleToItemPoolAdapter
from .adapters.simple import ItemPoolToSimpleAdapter
from .backends.memory import MemoryCacheBackend
from .backends.memory_pool import MemoryCachePool
from .interface import CacheItemPoolInterface, SimpleCacheInterface

logger = logging.getLogger(__name__)

# Global cache instances registry
_cache_instances: dict[str, SimpleCacheInterface] = {}


def _create_memory_cache(config: CacheConfig) -> SimpleCacheInterface:
    """Internal helper to construct a memory cache backend."""
    return MemoryCacheBackend(
        default_ttl=config.ttl_seconds,
        namespace=config.namespace,
    )


def _create_memory_pool_cache(config: CacheConfig) -> SimpleCacheInterface:
    """Internal helper to expose a memory item pool as a simple cache."""
    if config.ttl_seconds:
        logger.warning(
            "ttl_seconds is ignored by the memory_pool backend",
            extra={"ttl_seconds": config.ttl_seconds, "backend": "memory_pool"},
        )
    return ItemPoolToSimpleAdapter(MemoryCachePool(namespace=config.namespace))


def create_cache(
    config: CacheConfig | None = None,
    name: str = "default",
) -> SimpleCacheInterface:
    """
    Create a simple cache backend instance based on configuration.

    Args:
        config: Cache configuration (uses global config if not provided)
        name: Cache instance name (for multiple cache instances)

    Returns:
        Configured cache backend instance

    Raises:
        ConfigurationError: If cache configuration is invalid or backend unavailable
    """
    if name in _cache_instances:
        logger.debug("Returning existing cache instance: %s", name)
        return _cache_instances[name]

    if config is None:
        config = get_config().cache

    logger.info(
        "Creating cache instance '%s' with backend: %s",
        name,
        config.backend,
        extra={"cache_name": name, "backend": str(config.backend)},
    )

    if config.backend == CacheBackend.MEMORY:
        cache = _create_memory_cache(config)
    elif config.backend == CacheBackend.MEMORY_POOL:
        cache = _create_memory_pool_cache(config)
    else:
        raise ConfigurationError(
            f"Unknown cache backend: {config.backend}",
            details={
                "backend": str(config.backend),
                "supported": [b.value for b in CacheBackend],
            },
        )

    _cache_instances[name] = cache
    logger.info(
        "Cache instance '%s' created successfully",
        name,
        extra={"cache_name": name, "backend": str(config.backend)},
    )
    return cache


def create_item_pool(
    config: CacheConfig | None = None,
    name: str = "default",
) -> CacheItemPoolInterface:
    """
    Create an item pool over the named simple cache.

    The pool shares storage with create_cache(name=name). A cache that is
    itself an adapted pool hands back that pool instead of wrapping it twice.
    """
    cache = create_cache(config, name)
    if isinstance(cache, ItemPoolToSimpleAdapter):
        return cache.pool
    return SimpleToItemPoolAdapter(cache)


def get_cache(name: str = "default") -> SimpleCacheInterface:
    """
    Get an existing cache instance by name.

    If the instance doesn't exist, it is created from the global configuration.
    """
    if name not in _cache_instances:
        logger.debug("Cache instance '%s' not found, creating new instance", name)
        return create_cache(name=name)

    return _cache_instances[name]


def close_all_caches() -> None:
    """
    Close all cache instances and release resources.

    Errors from individual backends are logged; remaining instances are still closed.
    """
    if not _cache_instances:
        logger.debug("No cache instances to close")
        return

    logger.info("Closing %d cache instance(s)...", len(_cache_instances))

    for name, cache in list(_cache_instances.items()):
        try:
            cache.close()
            logger.info("Closed cache instance: %s", name)
        except Exception as e:
            logger.error(
                "Error closing cache instance '%s': %s",
                name,
                e,
                extra={"cache_name": name, "error": str(e)},
                exc_info=True,
            )

    _cache_instances.clear()
    logger.info("All cache instances closed")


def reset_cache_factory() -> None:
    """
    Reset the cache factory by clearing all instance references.

    Does NOT call close() on instances - use close_all_caches() for proper cleanup.
    Only use this in testing contexts.
    """
    count = len(_cache_instances)
    _cache_instances.clear()
    logger.debug("Reset cache factory, cleared %d instance reference(s)", count)


def list_cache_instances() -> list[str]:
    """List all registered cache instance names."""
    return list(_cache_instances.keys())

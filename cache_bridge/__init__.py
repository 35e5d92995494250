"""
cache-bridge — Cache Contract Adapters

Lets code written against a simple key-value cache use an item-pool cache,
and the other way around.
"""

__version__ = "1.0.0"

from .cache import (
    CacheItem,
    CacheItemPoolInterface,
    ItemPoolToSimpleAdapter,
    SimpleCacheInterface,
    SimpleToItemPoolAdapter,
)
from .errors import (
    CacheBridgeError,
    CachePoolInvalidArgumentError,
    InvalidArgumentError,
    SimpleCacheInvalidArgumentError,
)

__all__ = [
    "CacheItem",
    "CacheItemPoolInterface",
    "SimpleCacheInterface",
    "ItemPoolToSimpleAdapter",
    "SimpleToItemPoolAdapter",
    "CacheBridgeError",
    "InvalidArgumentError",
    "SimpleCacheInvalidArgumentError",
    "CachePoolInvalidArgumentError",
]

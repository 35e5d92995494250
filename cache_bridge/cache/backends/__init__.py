"""
cache-bridge — Cache Backends

Exports the bundled cache implementations:
- MemoryCacheBackend: simple key-value contract, in process
- MemoryCachePool: item-pool contract, in process
"""

from .memory import MemoryCacheBackend
from .memory_pool import MemoryCachePool

__all__ = [
    "MemoryCacheBackend",
    "MemoryCachePool",
]

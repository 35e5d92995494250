"""
cache-bridge — Cache Adapters

Translations between the two cache contracts:
- ItemPoolToSimpleAdapter: simple key-value contract over an item pool
- SimpleToItemPoolAdapter: item-pool contract over a simple key-value cache
"""

from .pool import SimpleToItemPoolAdapter
from .simple import ItemPoolToSimpleAdapter

__all__ = [
    "ItemPoolToSimpleAdapter",
    "SimpleToItemPoolAdapter",
]

"""
cache-bridge — Cache Interfaces

Defines the two cache contracts the adapters translate between:
- SimpleCacheInterface: direct key-value access with defaults, TTLs and bulk operations
- CacheItemPoolInterface: retrieval of stateful CacheItem objects that are saved back
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any

from .item import CacheItem
from .validation import TTL


class SimpleCacheInterface(ABC):
    """
    Simple key-value cache contract.

    Mutating operations report failure by returning False rather than raising.
    Illegal keys, TTLs or bulk inputs raise SimpleCacheInvalidArgumentError.
    """

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """
        Fetch a value from the cache.

        Args:
            key: Cache key
            default: Value returned on a cache miss

        Returns:
            The cached value, or default if the key does not exist
        """
        pass

    @abstractmethod
    def set(self, key: str, value: Any, ttl: TTL = None) -> bool:
        """
        Persist a value under key.

        Args:
            key: Cache key
            value: Value to store
            ttl: Seconds, timedelta, or None for no expiration

        Returns:
            True on success, False on failure
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Delete a key. Returns False only if there was an error."""
        pass

    @abstractmethod
    def clear(self) -> bool:
        """Wipe every entry. Returns True on success."""
        pass

    @abstractmethod
    def get_multiple(self, keys: Iterable[str], default: Any = None) -> dict[str, Any]:
        """
        Fetch several values in one operation.

        Returns:
            Mapping with one entry per requested key; misses map to default
        """
        pass

    @abstractmethod
    def set_multiple(self, values: Mapping[str, Any] | Iterable[tuple[str, Any]], ttl: TTL = None) -> bool:
        """Persist several key/value pairs with a shared TTL. True only if all succeeded."""
        pass

    @abstractmethod
    def delete_multiple(self, keys: Iterable[str]) -> bool:
        """Delete several keys in one operation."""
        pass

    @abstractmethod
    def has(self, key: str) -> bool:
        """
        Check whether key is present.

        The answer is only valid at the time of the call; another process may
        change the entry immediately afterwards.
        """
        pass

    def close(self) -> None:
        """Release backend resources. Called by the factory during shutdown."""
        return None


class CacheItemPoolInterface(ABC):
    """
    Item-pool cache contract.

    Illegal keys raise CachePoolInvalidArgumentError.
    """

    @abstractmethod
    def get_item(self, key: str) -> CacheItem:
        """
        Return the item for key.

        Always returns a CacheItem, even on a miss; never None.
        """
        pass

    @abstractmethod
    def get_items(self, keys: Iterable[str] = ()) -> dict[str, CacheItem]:
        """
        Return one item per requested key, hit or miss.

        An empty key list yields an empty mapping.
        """
        pass

    @abstractmethod
    def has_item(self, key: str) -> bool:
        """Check whether the pool holds an item for key."""
        pass

    @abstractmethod
    def clear(self) -> bool:
        """Delete all items in the pool."""
        pass

    @abstractmethod
    def delete_item(self, key: str) -> bool:
        """Remove the item for key."""
        pass

    @abstractmethod
    def delete_items(self, keys: Iterable[str]) -> bool:
        """Remove the items for several keys."""
        pass

    @abstractmethod
    def save(self, item: CacheItem) -> bool:
        """Persist an item immediately."""
        pass

    @abstractmethod
    def save_deferred(self, item: CacheItem) -> bool:
        """Queue an item to be persisted by commit()."""
        pass

    @abstractmethod
    def commit(self) -> bool:
        """Persist any deferred items. True if all were saved or there were none."""
        pass

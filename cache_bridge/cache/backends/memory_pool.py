"""
cache-bridge — Memory Item Pool

In-memory implementation of the item-pool contract, including a real
deferred-save queue flushed by commit().
"""

import logging
import threading
from collections.abc import Iterable
from datetime import datetime
from typing import Any

from ...errors import CachePoolInvalidArgumentError
from ..interface import CacheItemPoolInterface
from ..item import CacheItem, utcnow
from ..validation import extract_keys, validate_iterable, validate_key

logger = logging.getLogger(__name__)


class MemoryCachePool(CacheItemPoolInterface):
    """
    In-memory item pool.

    Items are stored as (value, expiration) pairs; expired entries are
    reported as misses and dropped on access. Deferred items are visible to
    get_item()/has_item() before they are committed.
    """

    def __init__(self, namespace: str = "cache_bridge"):
        self.namespace = namespace
        self._items: dict[str, tuple[Any, datetime | None]] = {}
        self._deferred: dict[str, CacheItem] = {}
        self._lock = threading.RLock()

    def _validate(self, key: Any) -> str:
        return validate_key(key, error=CachePoolInvalidArgumentError)

    def _lookup(self, key: str) -> CacheItem:
        deferred = self._deferred.get(key)
        if deferred is not None:
            if not deferred.is_expired():
                return CacheItem(key, deferred.get(), hit=True, expiration=deferred.expiration)
            # An expired pending save still supersedes the stored value
            del self._deferred[key]
            self._items.pop(key, None)
            return CacheItem(key)

        entry = self._items.get(key)
        if entry is None:
            return CacheItem(key)

        value, expiration = entry
        if expiration is not None and utcnow() >= expiration:
            del self._items[key]
            return CacheItem(key)
        return CacheItem(key, value, hit=True, expiration=expiration)

    def _write(self, item: CacheItem) -> None:
        if item.is_expired():
            self._items.pop(item.key, None)
            return
        self._items[item.key] = (item.get(), item.expiration)

    def get_item(self, key: str) -> CacheItem:
        self._validate(key)
        with self._lock:
            return self._lookup(key)

    def get_items(self, keys: Iterable[str] = ()) -> dict[str, CacheItem]:
        validate_iterable(keys, error=CachePoolInvalidArgumentError)
        key_list = extract_keys(keys)
        for key in key_list:
            self._validate(key)

        with self._lock:
            return {key: self._lookup(key) for key in key_list}

    def has_item(self, key: str) -> bool:
        self._validate(key)
        with self._lock:
            return self._lookup(key).is_hit()

    def clear(self) -> bool:
        with self._lock:
            size = len(self._items)
            self._items.clear()
            self._deferred.clear()
        logger.info(f"Cleared {size} items from memory pool namespace '{self.namespace}'")
        return True

    def delete_item(self, key: str) -> bool:
        self._validate(key)
        with self._lock:
            self._items.pop(key, None)
            self._deferred.pop(key, None)
            return True

    def delete_items(self, keys: Iterable[str]) -> bool:
        validate_iterable(keys, error=CachePoolInvalidArgumentError)
        key_list = extract_keys(keys)
        for key in key_list:
            self._validate(key)

        with self._lock:
            for key in key_list:
                self._items.pop(key, None)
                self._deferred.pop(key, None)
            return True

    def save(self, item: CacheItem) -> bool:
        self._validate(item.key)
        with self._lock:
            self._deferred.pop(item.key, None)
            self._write(item)
            return True

    def save_deferred(self, item: CacheItem) -> bool:
        self._validate(item.key)
        with self._lock:
            # Snapshot so later caller mutations do not leak into the queue
            self._deferred[item.key] = CacheItem(item.key, item.get(), hit=True, expiration=item.expiration)
            return True

    def commit(self) -> bool:
        with self._lock:
            count = len(self._deferred)
            for item in self._deferred.values():
                self._write(item)
            self._deferred.clear()
        logger.debug(f"Committed {count} deferred item(s) in memory pool namespace '{self.namespace}'")
        return True

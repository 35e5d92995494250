"""
cache-bridge — Simple Cache to Item Pool Adapter

Exposes the item-pool contract on top of any simple key-value cache.

Absolute item expirations are converted to relative TTLs at save time.
There is no write buffer: deferred saves are written immediately and
commit() has nothing to flush.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import timedelta

from ...errors import CachePoolInvalidArgumentError, SimpleCacheInvalidArgumentError, translate_invalid_argument
from ..interface import CacheItemPoolInterface, SimpleCacheInterface
from ..item import CacheItem, utcnow
from ..validation import extract_keys, validate_iterable

logger = logging.getLogger(__name__)


class SimpleToItemPoolAdapter(CacheItemPoolInterface):
    """
    CacheItemPoolInterface facade over a SimpleCacheInterface.

    SimpleCacheInvalidArgumentError raised by the wrapped cache surfaces as
    CachePoolInvalidArgumentError.
    """

    def __init__(self, cache: SimpleCacheInterface) -> None:
        self._cache = cache

    @property
    def cache(self) -> SimpleCacheInterface:
        return self._cache

    def _translate(self, error: SimpleCacheInvalidArgumentError, operation: str) -> CachePoolInvalidArgumentError:
        logger.debug(
            "Translating simple cache invalid argument in %s: %s",
            operation,
            error.message,
            extra={"operation": operation, "details": error.details},
        )
        return translate_invalid_argument(error, CachePoolInvalidArgumentError)

    def get_item(self, key: str) -> CacheItem:
        try:
            value = self._cache.get(key, None)
            # has() tells a stored None apart from a miss
            if value is not None or self._cache.has(key):
                return CacheItem(key, value, hit=True)
            return CacheItem(key)
        except SimpleCacheInvalidArgumentError as e:
            raise self._translate(e, "get_item") from e

    def get_items(self, keys: Iterable[str] = ()) -> dict[str, CacheItem]:
        validate_iterable(keys, error=CachePoolInvalidArgumentError)
        key_list = extract_keys(keys)
        if not key_list:
            return {}

        try:
            values = self._cache.get_multiple(key_list, None)
            result: dict[str, CacheItem] = {}
            for key in key_list:
                value = values.get(key)
                if value is not None or self._cache.has(key):
                    result[key] = CacheItem(key, value, hit=True)
                else:
                    result[key] = CacheItem(key)
            return result
        except SimpleCacheInvalidArgumentError as e:
            raise self._translate(e, "get_items") from e

    def has_item(self, key: str) -> bool:
        try:
            return self._cache.has(key)
        except SimpleCacheInvalidArgumentError as e:
            raise self._translate(e, "has_item") from e

    def clear(self) -> bool:
        return self._cache.clear()

    def delete_item(self, key: str) -> bool:
        try:
            return self._cache.delete(key)
        except SimpleCacheInvalidArgumentError as e:
            raise self._translate(e, "delete_item") from e

    def delete_items(self, keys: Iterable[str]) -> bool:
        validate_iterable(keys, error=CachePoolInvalidArgumentError)
        try:
            return self._cache.delete_multiple(extract_keys(keys))
        except SimpleCacheInvalidArgumentError as e:
            raise self._translate(e, "delete_items") from e

    def save(self, item: CacheItem) -> bool:
        """
        Persist an item immediately.

        An item expiring at T is stored with a TTL of T - now, never negative.
        Items of foreign types carry no readable expiration and are stored
        without a TTL.
        """
        ttl: timedelta | None = None
        if isinstance(item, CacheItem) and item.expiration is not None:
            ttl = max(item.expiration - utcnow(), timedelta(0))

        try:
            return self._cache.set(item.key, item.get(), ttl)
        except SimpleCacheInvalidArgumentError as e:
            raise self._translate(e, "save") from e

    def save_deferred(self, item: CacheItem) -> bool:
        return self.save(item)

    def commit(self) -> bool:
        return True

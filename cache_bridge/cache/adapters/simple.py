"""
cache-bridge — Item Pool to Simple Cache Adapter

Exposes the simple key-value contract on top of any item-pool cache.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from ...errors import CachePoolInvalidArgumentError, SimpleCacheInvalidArgumentError, translate_invalid_argument
from ..interface import CacheItemPoolInterface, SimpleCacheInterface
from ..validation import TTL, extract_keys, parse_iterable, validate_iterable, validate_ttl

logger = logging.getLogger(__name__)


class ItemPoolToSimpleAdapter(SimpleCacheInterface):
    """
    SimpleCacheInterface facade over a CacheItemPoolInterface.

    Every call is forwarded to the wrapped pool. CachePoolInvalidArgumentError
    raised by the pool surfaces as SimpleCacheInvalidArgumentError.
    """

    def __init__(self, pool: CacheItemPoolInterface) -> None:
        self._pool = pool

    @property
    def pool(self) -> CacheItemPoolInterface:
        return self._pool

    def _translate(self, error: CachePoolInvalidArgumentError, operation: str) -> SimpleCacheInvalidArgumentError:
        logger.debug(
            "Translating item pool invalid argument in %s: %s",
            operation,
            error.message,
            extra={"operation": operation, "details": error.details},
        )
        return translate_invalid_argument(error, SimpleCacheInvalidArgumentError)

    def get(self, key: str, default: Any = None) -> Any:
        try:
            item = self._pool.get_item(key)
        except CachePoolInvalidArgumentError as e:
            raise self._translate(e, "get") from e
        return item.get() if item.is_hit() else default

    def set(self, key: str, value: Any, ttl: TTL = None) -> bool:
        validate_ttl(ttl, error=SimpleCacheInvalidArgumentError)

        try:
            item = self._pool.get_item(key)
            item.set(value)
            item.expires_after(ttl)
            return self._pool.save(item)
        except CachePoolInvalidArgumentError as e:
            raise self._translate(e, "set") from e

    def delete(self, key: str) -> bool:
        try:
            return self._pool.delete_item(key)
        except CachePoolInvalidArgumentError as e:
            raise self._translate(e, "delete") from e

    def clear(self) -> bool:
        return self._pool.clear()

    def get_multiple(self, keys: Iterable[str], default: Any = None) -> dict[str, Any]:
        validate_iterable(keys, error=SimpleCacheInvalidArgumentError)
        key_list = extract_keys(keys)

        try:
            items = self._pool.get_items(key_list)
        except CachePoolInvalidArgumentError as e:
            raise self._translate(e, "get_multiple") from e

        result: dict[str, Any] = {}
        for key in key_list:
            item = items.get(key)
            result[key] = item.get() if item is not None and item.is_hit() else default
        return result

    def set_multiple(self, values: Mapping[str, Any] | Iterable[tuple[str, Any]], ttl: TTL = None) -> bool:
        """
        Persist several values through the pool.

        Items are saved one by one and saving stops at the first failure.
        Items saved before the failure stay saved; the rest are skipped.
        """
        validate_iterable(values, error=SimpleCacheInvalidArgumentError)
        validate_ttl(ttl, error=SimpleCacheInvalidArgumentError)

        keys, mapping = parse_iterable(values, error=SimpleCacheInvalidArgumentError)

        try:
            items = self._pool.get_items(keys)
            result = True
            failed: list[str] = []
            for key, item in items.items():
                if not result:
                    failed.append(key)
                    continue
                item.set(mapping[key])
                item.expires_after(ttl)
                if not self._pool.save(item):
                    result = False
                    failed.append(key)
        except CachePoolInvalidArgumentError as e:
            raise self._translate(e, "set_multiple") from e

        if failed:
            logger.warning(
                "set_multiple stopped at key '%s': %d of %d item(s) not saved",
                failed[0],
                len(failed),
                len(keys),
                extra={"failed_keys": failed, "key_count": len(keys)},
            )
        return result

    def delete_multiple(self, keys: Iterable[str]) -> bool:
        validate_iterable(keys, error=SimpleCacheInvalidArgumentError)
        key_list = extract_keys(keys)

        try:
            return self._pool.delete_items(key_list)
        except CachePoolInvalidArgumentError as e:
            raise self._translate(e, "delete_multiple") from e

    def has(self, key: str) -> bool:
        try:
            return self._pool.has_item(key)
        except CachePoolInvalidArgumentError as e:
            raise self._translate(e, "has") from e

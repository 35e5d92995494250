"""
cache-bridge — Memory Cache Backend

In-memory implementation of the simple key-value contract with TTL support.
Thread-safe and suitable for single-process deployments and tests.
"""

import logging
import threading
import time
from collections.abc import Iterable, Mapping
from typing import Any

from ...errors import SimpleCacheInvalidArgumentError
from ..interface import SimpleCacheInterface
from ..validation import (
    TTL,
    extract_keys,
    parse_iterable,
    ttl_to_timedelta,
    validate_iterable,
    validate_key,
    validate_ttl,
)

logger = logging.getLogger(__name__)


class MemoryCacheBackend(SimpleCacheInterface):
    """
    In-memory simple cache backend.

    Features:
    - Per-key TTL support (non-positive TTL removes the key)
    - Namespaced keys
    - Hit/miss statistics
    - Thread-safe operations
    """

    def __init__(
        self,
        default_ttl: int = 0,
        namespace: str = "cache_bridge",
    ):
        """
        Initialize memory cache backend.

        Args:
            default_ttl: TTL in seconds applied when set() gets no TTL (0 = no expiry)
            namespace: Cache key namespace/prefix
        """
        self.default_ttl = max(0, int(default_ttl))
        self.namespace = namespace

        # Cache storage: key -> (value, expiry_time)
        self._cache: dict[str, tuple[Any, float | None]] = {}

        # Stats
        self._hits = 0
        self._misses = 0
        self._sets = 0
        self._deletes = 0

        self._lock = threading.RLock()

    def _make_key(self, key: str) -> str:
        """Create namespaced cache key."""
        return f"{self.namespace}:{key}"

    def _is_expired(self, expiry: float | None) -> bool:
        """Check if entry is expired."""
        if expiry is None:
            return False
        return time.time() >= expiry

    def _expiry(self, ttl: TTL) -> float | None:
        """Absolute expiry time for a validated TTL; None means no expiry."""
        delta = ttl_to_timedelta(ttl)
        if delta is None:
            return time.time() + self.default_ttl if self.default_ttl > 0 else None
        return time.time() + delta.total_seconds()

    def _lookup(self, key: str) -> tuple[bool, Any]:
        """Return (found, value) for a validated key, dropping expired entries."""
        cache_key = self._make_key(key)
        entry = self._cache.get(cache_key)
        if entry is None:
            return False, None

        value, expiry = entry
        if self._is_expired(expiry):
            del self._cache[cache_key]
            return False, None
        return True, value

    def _store(self, key: str, value: Any, expiry: float | None) -> None:
        cache_key = self._make_key(key)
        if expiry is not None and self._is_expired(expiry):
            # Already expired: a non-positive TTL removes the entry
            if self._cache.pop(cache_key, None) is not None:
                self._deletes += 1
            return
        self._cache[cache_key] = (value, expiry)
        self._sets += 1

    def get(self, key: str, default: Any = None) -> Any:
        """Retrieve value from cache."""
        validate_key(key, error=SimpleCacheInvalidArgumentError)

        with self._lock:
            found, value = self._lookup(key)
            if not found:
                self._misses += 1
                return default
            self._hits += 1
            return value

    def set(self, key: str, value: Any, ttl: TTL = None) -> bool:
        """Store value in cache."""
        validate_key(key, error=SimpleCacheInvalidArgumentError)
        validate_ttl(ttl, error=SimpleCacheInvalidArgumentError)

        with self._lock:
            self._store(key, value, self._expiry(ttl))
            return True

    def delete(self, key: str) -> bool:
        """Delete key from cache. Deleting a missing key is not an error."""
        validate_key(key, error=SimpleCacheInvalidArgumentError)

        with self._lock:
            if self._cache.pop(self._make_key(key), None) is not None:
                self._deletes += 1
            return True

    def clear(self) -> bool:
        """Clear all entries from cache."""
        with self._lock:
            size = len(self._cache)
            self._cache.clear()
        logger.info(f"Cleared {size} entries from memory cache namespace '{self.namespace}'")
        return True

    def get_multiple(self, keys: Iterable[str], default: Any = None) -> dict[str, Any]:
        """Retrieve multiple values; misses map to default."""
        validate_iterable(keys, error=SimpleCacheInvalidArgumentError)
        key_list = extract_keys(keys)
        for key in key_list:
            validate_key(key, error=SimpleCacheInvalidArgumentError)

        with self._lock:
            result: dict[str, Any] = {}
            for key in key_list:
                found, value = self._lookup(key)
                if found:
                    self._hits += 1
                    result[key] = value
                else:
                    self._misses += 1
                    result[key] = default
            return result

    def set_multiple(self, values: Mapping[str, Any] | Iterable[tuple[str, Any]], ttl: TTL = None) -> bool:
        """Store multiple values with a shared TTL."""
        validate_iterable(values, error=SimpleCacheInvalidArgumentError)
        validate_ttl(ttl, error=SimpleCacheInvalidArgumentError)
        keys, mapping = parse_iterable(values, error=SimpleCacheInvalidArgumentError)
        for key in keys:
            validate_key(key, error=SimpleCacheInvalidArgumentError)

        with self._lock:
            expiry = self._expiry(ttl)
            for key in keys:
                self._store(key, mapping[key], expiry)
            return True

    def delete_multiple(self, keys: Iterable[str]) -> bool:
        """Delete multiple keys."""
        validate_iterable(keys, error=SimpleCacheInvalidArgumentError)
        key_list = extract_keys(keys)
        for key in key_list:
            validate_key(key, error=SimpleCacheInvalidArgumentError)

        with self._lock:
            for key in key_list:
                if self._cache.pop(self._make_key(key), None) is not None:
                    self._deletes += 1
            return True

    def has(self, key: str) -> bool:
        """Check if key exists and is not expired."""
        validate_key(key, error=SimpleCacheInvalidArgumentError)

        with self._lock:
            found, _ = self._lookup(key)
            return found

    def get_stats(self) -> dict[str, Any]:
        """Get cache statistics."""
        with self._lock:
            total_requests = self._hits + self._misses
            hit_rate = (self._hits / total_requests * 100) if total_requests > 0 else 0.0

            return {
                "backend": "memory",
                "size": len(self._cache),
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": round(hit_rate, 2),
                "sets": self._sets,
                "deletes": self._deletes,
                "namespace": self.namespace,
            }

    def close(self) -> None:
        """Close cache and release resources."""
        logger.debug(f"Memory cache backend closed for namespace '{self.namespace}'")

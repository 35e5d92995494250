"""
cache-bridge — Cache Item

A single slot of an item-pool cache: key, value, hit flag and expiration.
Items are produced by a pool on every retrieval, mutated by the caller and
handed back to the pool's save().
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

from ..errors import CachePoolInvalidArgumentError, ErrorCode
from .validation import TTL, ttl_to_timedelta, validate_ttl


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class CacheItem:
    """
    Value container returned by CacheItemPoolInterface.get_item().

    The hit flag is decided by the pool that builds the item and cannot be
    changed afterwards.
    """

    __slots__ = ("_key", "_value", "_hit", "_expiration")

    def __init__(
        self,
        key: str,
        value: Any = None,
        *,
        hit: bool = False,
        expiration: datetime | None = None,
    ) -> None:
        self._key = key
        self._value = value if hit else None
        self._hit = hit
        self._expiration: datetime | None = None
        if expiration is not None:
            self.expires_at(expiration)

    @property
    def key(self) -> str:
        return self._key

    @property
    def expiration(self) -> datetime | None:
        """Absolute expiration (aware UTC), or None when the item never expires."""
        return self._expiration

    def get(self) -> Any:
        """Return the item's value (None on a miss)."""
        return self._value

    def is_hit(self) -> bool:
        return self._hit

    def set(self, value: Any) -> CacheItem:
        self._value = value
        return self

    def expires_at(self, when: datetime | None) -> CacheItem:
        """
        Set an absolute expiration.

        Naive datetimes are interpreted as local time.

        Raises:
            CachePoolInvalidArgumentError: If when is neither None nor a datetime
        """
        if when is None:
            self._expiration = None
        elif isinstance(when, datetime):
            self._expiration = when.astimezone(timezone.utc)
        else:
            raise CachePoolInvalidArgumentError(
                f"Expiration must be a datetime or None, got {type(when).__name__}",
                details={"key": self._key, "expiration_type": type(when).__name__},
                error_code=ErrorCode.INVALID_TTL,
            )
        return self

    def expires_after(self, ttl: TTL) -> CacheItem:
        """
        Set a relative expiration, counted from now.

        Args:
            ttl: Seconds, timedelta, or None for no expiration

        Raises:
            CachePoolInvalidArgumentError: If ttl is not a recognized TTL form
        """
        validate_ttl(ttl, error=CachePoolInvalidArgumentError)
        delta = ttl_to_timedelta(ttl)
        if delta is None:
            self._expiration = None
            return self

        try:
            self._expiration = utcnow() + delta
        except OverflowError:
            # Clamp to the representable range
            bound = datetime.max if delta > timedelta(0) else datetime.min
            self._expiration = bound.replace(tzinfo=timezone.utc)
        return self

    def is_expired(self, now: datetime | None = None) -> bool:
        if self._expiration is None:
            return False
        return (now or utcnow()) >= self._expiration

    def __repr__(self) -> str:
        return f"CacheItem(key={self._key!r}, hit={self._hit}, expiration={self._expiration!r})"

"""
cache-bridge — Shared Argument Validation

Shape checks for keys, TTLs and bulk inputs, shared by both adapters and the
bundled backends. Every validator takes the InvalidArgument kind to raise so
each contract reports errors in its own flavour.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import timedelta
from typing import Any

from ..errors import ErrorCode, InvalidArgumentError

# Characters reserved by both cache contracts; never legal inside a key.
RESERVED_KEY_CHARACTERS = frozenset("{}()/\\@:")

TTL = int | timedelta | None


def validate_key(key: Any, error: type[InvalidArgumentError] = InvalidArgumentError) -> str:
    """
    Ensure key is a legal cache key.

    Args:
        key: Candidate key
        error: InvalidArgument kind to raise

    Returns:
        The key, unchanged

    Raises:
        InvalidArgumentError: If key is not a non-empty string or contains reserved characters
    """
    if not isinstance(key, str):
        raise error(
            f"Cache key must be a string, got {type(key).__name__}",
            details={"key_type": type(key).__name__},
            error_code=ErrorCode.INVALID_KEY,
        )
    if not key:
        raise error("Cache key must not be empty", details={"key": key}, error_code=ErrorCode.INVALID_KEY)

    reserved = sorted(RESERVED_KEY_CHARACTERS.intersection(key))
    if reserved:
        raise error(
            f"Cache key '{key}' contains reserved characters: {''.join(reserved)}",
            details={"key": key, "reserved": reserved},
            error_code=ErrorCode.INVALID_KEY,
        )
    return key


def validate_ttl(ttl: Any, error: type[InvalidArgumentError] = InvalidArgumentError) -> None:
    """Ensure ttl is None, an integer number of seconds, or a timedelta."""
    if ttl is None or isinstance(ttl, timedelta):
        return
    # bool is an int subclass but never a meaningful duration
    if isinstance(ttl, int) and not isinstance(ttl, bool):
        return
    raise error(
        f"TTL must be None, int or timedelta, got {type(ttl).__name__}",
        details={"ttl_type": type(ttl).__name__},
        error_code=ErrorCode.INVALID_TTL,
    )


def validate_iterable(value: Any, error: type[InvalidArgumentError] = InvalidArgumentError) -> None:
    """Ensure value can be iterated as a collection (a bare string does not count)."""
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise error(
            f"Expected an iterable, got {type(value).__name__}",
            details={"value_type": type(value).__name__},
            error_code=ErrorCode.INVALID_ITERABLE,
        )


def extract_keys(keys: Iterable[Any]) -> list[Any]:
    """Materialize keys into a list, preserving order."""
    if isinstance(keys, list):
        return keys
    return list(keys)


def parse_iterable(
    values: Mapping[Any, Any] | Iterable[tuple[Any, Any]],
    error: type[InvalidArgumentError] = InvalidArgumentError,
) -> tuple[list[str], dict[str, Any]]:
    """
    Split bulk input into an ordered key list and a key -> value mapping.

    Accepts a mapping or an iterable of (key, value) pairs. Keys must be str
    or int; int keys are converted to str.

    Raises:
        InvalidArgumentError: If an entry is not a pair or its key is neither str nor int
    """
    pairs = values.items() if isinstance(values, Mapping) else values

    keys: list[str] = []
    mapping: dict[str, Any] = {}
    for entry in pairs:
        try:
            key, value = entry
        except (TypeError, ValueError) as e:
            raise error(
                "Bulk values must be a mapping or an iterable of (key, value) pairs",
                details={"entry_type": type(entry).__name__},
                error_code=ErrorCode.INVALID_ITERABLE,
            ) from e

        if isinstance(key, bool) or not isinstance(key, (str, int)):
            raise error(
                f"Cache key must be a string or integer, got {type(key).__name__}",
                details={"key_type": type(key).__name__},
                error_code=ErrorCode.INVALID_KEY,
            )

        key = str(key)
        if key not in mapping:
            keys.append(key)
        mapping[key] = value

    return keys, mapping


def ttl_to_timedelta(ttl: TTL) -> timedelta | None:
    """
    Normalize an already validated TTL to a timedelta (None stays None).

    Integer TTLs beyond the timedelta range saturate at timedelta.max or
    timedelta.min.
    """
    if ttl is None or isinstance(ttl, timedelta):
        return ttl
    try:
        return timedelta(seconds=ttl)
    except OverflowError:
        return timedelta.max if ttl > 0 else timedelta.min

"""
cache-bridge — Core Error Types

Defines the exception hierarchy for the adapter layer.
All exceptions inherit from CacheBridgeError for consistent error handling.

The adapters only ever raise one kind of error, InvalidArgumentError, in the
flavour of the contract they expose:
- SimpleCacheInvalidArgumentError for the simple key-value contract
- CachePoolInvalidArgumentError for the item-pool contract
"""

from enum import Enum
from typing import Any, TypeVar


class ErrorCode(str, Enum):
    """Standard error codes carried by CacheBridgeError.to_dict()."""

    # Input validation errors
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    INVALID_KEY = "INVALID_KEY"
    INVALID_TTL = "INVALID_TTL"
    INVALID_ITERABLE = "INVALID_ITERABLE"

    # Cache errors
    CACHE_FAILURE = "CACHE_FAILURE"

    # Configuration errors
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"

    # Internal errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class CacheBridgeError(Exception):
    """Base exception for all cache-bridge errors."""

    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        error_code: ErrorCode | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        if error_code is not None:
            self.error_code = error_code

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a plain dictionary (logging, API responses)."""
        return {
            "error": self.__class__.__name__,
            "error_code": self.error_code.value,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(CacheBridgeError):
    """Raised when configuration is invalid or missing."""

    error_code = ErrorCode.CONFIGURATION_ERROR


class CacheError(CacheBridgeError):
    """Base exception for cache backend errors."""

    error_code = ErrorCode.CACHE_FAILURE


class InvalidArgumentError(CacheBridgeError, ValueError):
    """
    Raised when a key, TTL or bulk input is not a legal value.

    This is the only error kind the adapter layer introduces.
    """

    error_code = ErrorCode.INVALID_ARGUMENT

    def __init__(
        self,
        message: str = "Invalid argument",
        details: dict[str, Any] | None = None,
        error_code: ErrorCode | None = None,
    ):
        super().__init__(message, details, error_code)


class SimpleCacheInvalidArgumentError(InvalidArgumentError):
    """InvalidArgument kind of the simple key-value contract."""

    pass


class CachePoolInvalidArgumentError(InvalidArgumentError):
    """InvalidArgument kind of the item-pool contract."""

    pass


_E = TypeVar("_E", bound=InvalidArgumentError)


def translate_invalid_argument(error: InvalidArgumentError, target: type[_E]) -> _E:
    """
    Build the target contract's InvalidArgument from another contract's one.

    Message, details and error code are preserved so callers lose nothing
    but the foreign type. Callers chain with ``raise ... from error``.
    """
    return target(error.message, details=dict(error.details), error_code=error.error_code)

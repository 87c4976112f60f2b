"""Exception hierarchy for cachebridge.

All package exceptions inherit from CacheBridgeException, so callers can
catch a single base type or target a specific failure.

Categories:
- ValidationException: bad arguments handed to the simple-cache contract
- CacheConfigurationException: bad registry or engine configuration
"""

from __future__ import annotations


# =============================================================================
# Base Exception
# =============================================================================


class CacheBridgeException(Exception):
    """Base exception for all cachebridge errors.

    Carries an optional error code and context dict for structured error data.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "INVALID_ARGUMENT").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Validation Exceptions
# =============================================================================


class ValidationException(CacheBridgeException):
    """Input validation failures."""


class InvalidArgumentException(ValidationException, ValueError):
    """A key, key collection, value mapping or TTL is not acceptable."""


# =============================================================================
# Configuration Exceptions
# =============================================================================


class CacheConfigurationException(CacheBridgeException):
    """A cache configuration is missing, duplicated or malformed."""


class EngineNotFoundException(CacheConfigurationException, KeyError):
    """No engine is registered under the requested configuration name."""

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return str(self.args[0]) if self.args else ""

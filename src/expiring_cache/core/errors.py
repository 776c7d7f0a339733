from __future__ import annotations

from typing import Any, Hashable


class ExpiringCacheError(Exception):
    """Base error for the expiring cache package."""


class ValueExpiredError(ExpiringCacheError):
    """Raised when a cached value was present but its expiration has passed.

    The stale payload is attached as ``value``; callers must not treat it as usable.
    """

    def __init__(self, key: Hashable, value: Any) -> None:
        super().__init__("cached value has expired")
        self.key = key
        self.value = value


class CacheMissError(ExpiringCacheError):
    """Raised by the bundled stores when a key is not present."""


class ValidationError(ExpiringCacheError):
    """Raised when user input is invalid."""


class ExternalServiceError(ExpiringCacheError):
    """Raised when a remote store fails."""

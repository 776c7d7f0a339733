"""Expiration enforcement for key/value stores that do not honor TTLs."""

from .core.errors import (
    CacheMissError,
    ExpiringCacheError,
    ExternalServiceError,
    ValidationError,
    ValueExpiredError,
)
from .core.expiring import DEFAULT_EXPIRATION, EXPIRING_STORE_TYPE, ExpiringStore, WrappedValue
from .core.interfaces import Clearer, Store
from .core.models import InvalidateOptions, StoreOptions
from .stores import HttpStore, MemoryStore, get_default_store, get_store

__all__ = [
    "CacheMissError",
    "Clearer",
    "DEFAULT_EXPIRATION",
    "EXPIRING_STORE_TYPE",
    "ExpiringCacheError",
    "ExpiringStore",
    "ExternalServiceError",
    "HttpStore",
    "InvalidateOptions",
    "MemoryStore",
    "Store",
    "StoreOptions",
    "ValidationError",
    "ValueExpiredError",
    "WrappedValue",
    "get_default_store",
    "get_store",
]

"""Expiration-enforcing decorator for stores that ignore per-entry TTLs.

Every write is wrapped with an absolute wall-clock expiration timestamp;
every read checks it. Expired entries are evicted lazily, on read, with a
best-effort delete against the backing store.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Hashable, Optional

from .errors import ValueExpiredError
from .interfaces import Clearer, Store
from .models import InvalidateOptions, StoreOptions

logger = logging.getLogger(__name__)

EXPIRING_STORE_TYPE = "expiring"

# 720 hours
DEFAULT_EXPIRATION = 720 * 60 * 60.0


@dataclass(frozen=True, slots=True)
class WrappedValue:
    # Payload + absolute expiration time
    expire_at: float  # time.time()
    value: Any


class ExpiringStore:
    # Store decorator; holds no mutable state of its own
    def __init__(self, store: Store, options: Optional[StoreOptions] = None) -> None:
        expiration = DEFAULT_EXPIRATION
        if options is not None and options.expiration_value() > 0:
            expiration = options.expiration_value()

        self._expiration = expiration
        self._store = store

    @property
    def expiration(self) -> float:
        return self._expiration

    async def get(self, key: Hashable) -> Any:
        """Return the value stored under ``key``.

        Errors raised by the backing store (including its miss signal) propagate
        unchanged. Values not written through this decorator are returned as-is.
        Raises ValueExpiredError, with the stale payload attached, when the
        value's expiration has passed.
        """
        value = await self._store.get(key)
        if not isinstance(value, WrappedValue):
            return value

        if value.expire_at < time.time():
            try:
                await self._store.delete(key)
            except Exception as e:
                logger.warning("Best-effort delete of expired key %r failed: %s", key, e)
            else:
                logger.debug("Evicted expired key %r", key)
            raise ValueExpiredError(key, value.value)

        return value.value

    async def set(self, key: Hashable, value: Any, options: Optional[StoreOptions] = None) -> None:
        ttl = self._expiration
        if options is not None and options.expiration_value() > 0:
            ttl = options.expiration_value()

        wrapped = WrappedValue(expire_at=time.time() + ttl, value=value)
        await self._store.set(key, wrapped, options)

    async def delete(self, key: Hashable) -> None:
        await self._store.delete(key)

    async def invalidate(self, options: InvalidateOptions) -> None:
        await self._store.invalidate(options)

    async def clear(self) -> None:
        # Clear is optional on backing stores; absence is a no-op
        if isinstance(self._store, Clearer):
            return await self._store.clear()
        return None

    def get_type(self) -> str:
        return EXPIRING_STORE_TYPE

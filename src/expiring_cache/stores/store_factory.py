"""Factory for selecting the appropriate backing Store implementation.

Exposes get_store which returns either a MemoryStore or an HttpStore,
wrapped in an ExpiringStore unless told otherwise.
"""

from __future__ import annotations

from typing import Optional

from .. import config
from ..core.errors import ValidationError
from ..core.expiring import ExpiringStore
from ..core.interfaces import Store
from ..core.models import StoreOptions
from .http_store import HttpStore
from .memory_store import MemoryStore


def get_store(
    kind: Optional[str] = None,
    *,
    base_url: Optional[str] = None,
    timeout: float = 20.0,
    verify: bool = True,
    maxsize: int = 10_000,
    expiration: Optional[float] = None,
    expiring: bool = True,
    http_store: Optional[HttpStore] = None,
) -> Store:
    """
    Factory that returns the configured Store.

    Priority Logic:
    1. If a base_url is provided -> Use HttpStore.
    2. If kind == "http" (explicitly requested) -> Use HttpStore.
    3. kind None or "memory" -> Use MemoryStore.

    The result is wrapped in ExpiringStore when ``expiring`` is true.
    """

    store: Store
    if (base_url and base_url.strip()) or kind == "http":
        if not base_url or not base_url.strip():
            raise ValidationError("Missing base_url for http store")

        store = http_store or HttpStore(base_url=base_url, timeout=timeout, verify=verify)
    elif kind in (None, "memory"):
        store = MemoryStore(maxsize=maxsize)
    else:
        raise ValidationError(f"Unknown store kind: {kind}")

    if not expiring:
        return store
    return ExpiringStore(store, StoreOptions(expiration=expiration))


def get_default_store() -> Store:
    # Store built from environment configuration
    return get_store(
        config.CACHE_STORE,
        base_url=config.CACHE_STORE_URL or None,
        timeout=config.CACHE_STORE_TIMEOUT,
        verify=config.HTTP_VERIFY,
        maxsize=config.CACHE_MAXSIZE,
        expiration=config.DEFAULT_EXPIRATION,
    )

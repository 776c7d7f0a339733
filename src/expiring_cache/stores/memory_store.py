"""In-process backing store with simple LRU eviction and tag invalidation.

Entries never expire on their own: per-call expiration options are accepted
and ignored. Wrap it in ExpiringStore to get TTL semantics.
"""

from __future__ import annotations

from collections import OrderedDict
from typing import Any, Dict, Hashable, Optional, Set

from ..core.errors import CacheMissError
from ..core.models import InvalidateOptions, StoreOptions

MEMORY_STORE_TYPE = "memory"


class MemoryStore:
    # Bounded key/value map using OrderedDict for LRU order
    def __init__(self, *, maxsize: int = 10_000) -> None:
        self._maxsize = max(1, int(maxsize))
        self._store: "OrderedDict[Hashable, Any]" = OrderedDict()
        self._tags: Dict[str, Set[Hashable]] = {}
        # Reverse index: key -> its tags
        self._key_tags: Dict[Hashable, Set[str]] = {}

    def __len__(self) -> int:
        return len(self._store)

    async def get(self, key: Hashable) -> Any:
        if key not in self._store:
            raise CacheMissError(f"Key not found: {key!r}")

        # Move to end to mark as recently used
        self._store.move_to_end(key, last=True)
        return self._store[key]

    async def set(self, key: Hashable, value: Any, options: Optional[StoreOptions] = None) -> None:
        self._forget_tags(key)
        self._store[key] = value
        self._store.move_to_end(key, last=True)

        if options is not None and options.tags:
            self._key_tags[key] = set(options.tags)
            for tag in options.tags:
                self._tags.setdefault(tag, set()).add(key)

        # Evict oldest entries while over maxsize
        while len(self._store) > self._maxsize:
            oldest, _ = self._store.popitem(last=False)
            self._forget_tags(oldest)

    async def delete(self, key: Hashable) -> None:
        self._store.pop(key, None)
        self._forget_tags(key)

    async def invalidate(self, options: InvalidateOptions) -> None:
        for tag in options.tags:
            for key in self._tags.pop(tag, set()):
                await self.delete(key)

    async def clear(self) -> None:
        self._store.clear()
        self._tags.clear()
        self._key_tags.clear()

    def get_type(self) -> str:
        return MEMORY_STORE_TYPE

    def _forget_tags(self, key: Hashable) -> None:
        for tag in self._key_tags.pop(key, ()):
            keys = self._tags.get(tag)
            if keys is None:
                continue
            keys.discard(key)
            if not keys:
                del self._tags[tag]

"""Core protocol and interface definitions.

Defines the Store protocol implemented by every backing store (memory,
HTTP) and by the expiring decorator itself, plus the optional Clearer
capability that some stores expose.
"""

from __future__ import annotations

from typing import Any, Hashable, Optional, Protocol, runtime_checkable

from .models import InvalidateOptions, StoreOptions


@runtime_checkable
class Store(Protocol):
    """Contract for any key/value cache store."""
    async def get(self, key: Hashable) -> Any:
        ...

    async def set(
        self,
        key: Hashable,
        value: Any,
        options: Optional[StoreOptions] = None,
    ) -> None:
        ...

    async def delete(self, key: Hashable) -> None:
        ...

    async def invalidate(self, options: InvalidateOptions) -> None:
        ...

    def get_type(self) -> str:
        ...


@runtime_checkable
class Clearer(Protocol):
    """Optional capability: drop every entry of a store."""
    async def clear(self) -> None:
        ...

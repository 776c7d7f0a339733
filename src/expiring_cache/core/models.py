"""Immutable dataclasses for per-call store options.

StoreOptions travels with every write (expiration override, tags, cost);
InvalidateOptions selects entries for bulk invalidation by tag.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class StoreOptions:
    """Options accepted by ``Store.set``.

    Field groups:
    - Expiration: expiration (seconds; None or <= 0 means "not set")
    - Backing store hints: tags, cost
    """

    expiration: Optional[float] = None

    tags: Tuple[str, ...] = ()
    cost: int = 0

    def expiration_value(self) -> float:
        if self.expiration is None:
            return 0.0
        return float(self.expiration)


@dataclass(frozen=True)
class InvalidateOptions:
    """Options accepted by ``Store.invalidate``."""

    tags: Tuple[str, ...] = ()

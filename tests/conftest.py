import pytest

import expiring_cache.core.expiring as expiring_mod
from expiring_cache.core.errors import CacheMissError


class MapStore:
    """Dict-backed store that counts calls and ignores expiration."""

    def __init__(self) -> None:
        self.cache = {}
        self.set_count = 0
        self.get_count = 0
        self.delete_count = 0
        self.clear_count = 0
        self.invalidate_count = 0
        self.last_options = None

    async def get(self, key):
        self.get_count += 1
        if key not in self.cache:
            raise CacheMissError("miss")
        return self.cache[key]

    async def set(self, key, value, options=None):
        self.set_count += 1
        self.last_options = options
        self.cache[key] = value

    async def delete(self, key):
        self.delete_count += 1
        self.cache.pop(key, None)

    async def invalidate(self, options):
        self.invalidate_count += 1

    async def clear(self):
        self.clear_count += 1
        self.cache.clear()

    def get_type(self):
        return "map"


class NonClearable:
    """Store without the clear capability."""

    async def get(self, key):
        return None

    async def set(self, key, value, options=None):
        return None

    async def delete(self, key):
        return None

    async def invalidate(self, options):
        return None

    def get_type(self):
        return "non-clearable"


class FakeClock:
    def __init__(self, now: float = 1_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock(monkeypatch):
    c = FakeClock()
    # Replaces the global time.time; monkeypatch restores it afterwards
    monkeypatch.setattr(expiring_mod.time, "time", c)
    return c


@pytest.fixture
def map_store():
    return MapStore()

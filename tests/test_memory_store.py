import pytest

from expiring_cache.core.errors import CacheMissError, ValueExpiredError
from expiring_cache.core.expiring import ExpiringStore
from expiring_cache.core.interfaces import Clearer, Store
from expiring_cache.core.models import InvalidateOptions, StoreOptions
from expiring_cache.stores.memory_store import MemoryStore


def test_memory_store_satisfies_protocols():
    s = MemoryStore()
    assert isinstance(s, Store)
    assert isinstance(s, Clearer)
    assert s.get_type() == "memory"


@pytest.mark.asyncio
async def test_memory_store_set_get_and_miss():
    s = MemoryStore()

    with pytest.raises(CacheMissError):
        await s.get("k")

    await s.set("k", "v")
    assert await s.get("k") == "v"
    assert len(s) == 1


@pytest.mark.asyncio
async def test_memory_store_ignores_expiration():
    s = MemoryStore()
    await s.set("k", "v", StoreOptions(expiration=1e-9))
    await s.set("gone", "v", StoreOptions(expiration=-1.0))

    # Stored as-is, no envelope and no expiry bookkeeping
    assert await s.get("k") == "v"
    assert await s.get("gone") == "v"
    assert len(s) == 2


@pytest.mark.asyncio
async def test_memory_store_eviction_by_maxsize():
    s = MemoryStore(maxsize=2)

    await s.set("a", 1)
    await s.set("b", 2)
    await s.set("c", 3)

    with pytest.raises(CacheMissError):
        await s.get("a")
    assert await s.get("b") == 2
    assert await s.get("c") == 3


@pytest.mark.asyncio
async def test_memory_store_lru_touch_moves_to_end():
    s = MemoryStore(maxsize=2)

    await s.set("a", 1)
    await s.set("b", 2)

    assert await s.get("a") == 1

    await s.set("c", 3)

    assert await s.get("a") == 1
    with pytest.raises(CacheMissError):
        await s.get("b")
    assert await s.get("c") == 3


@pytest.mark.asyncio
async def test_memory_store_invalidate_by_tag():
    s = MemoryStore()

    await s.set("a", 1, StoreOptions(tags=("red",)))
    await s.set("b", 2, StoreOptions(tags=("red", "blue")))
    await s.set("c", 3, StoreOptions(tags=("blue",)))
    await s.set("d", 4)

    await s.invalidate(InvalidateOptions(tags=("red",)))

    with pytest.raises(CacheMissError):
        await s.get("a")
    with pytest.raises(CacheMissError):
        await s.get("b")
    assert await s.get("c") == 3
    assert await s.get("d") == 4


@pytest.mark.asyncio
async def test_memory_store_overwrite_drops_old_tags():
    s = MemoryStore()

    await s.set("a", 1, StoreOptions(tags=("red",)))
    await s.set("a", 2)
    await s.invalidate(InvalidateOptions(tags=("red",)))

    assert await s.get("a") == 2


@pytest.mark.asyncio
async def test_memory_store_delete_and_clear():
    s = MemoryStore()
    await s.set("a", 1)
    await s.set("b", 2)

    await s.delete("a")
    await s.delete("missing")
    with pytest.raises(CacheMissError):
        await s.get("a")

    await s.clear()
    assert len(s) == 0


@pytest.mark.asyncio
async def test_expiring_over_memory_store(clock):
    es = ExpiringStore(MemoryStore(), StoreOptions(expiration=1.0))

    with pytest.raises(CacheMissError):
        await es.get("k")

    await es.set("k", "v")
    assert await es.get("k") == "v"

    clock.advance(1.01)
    with pytest.raises(ValueExpiredError) as exc_info:
        await es.get("k")
    assert exc_info.value.value == "v"

    with pytest.raises(CacheMissError):
        await es.get("k")


@pytest.mark.asyncio
async def test_expiring_clear_over_memory_store():
    ms = MemoryStore()
    es = ExpiringStore(ms)
    await es.set("a", 1)
    await es.set("b", 2)

    await es.clear()

    assert len(ms) == 0


@pytest.mark.asyncio
async def test_memory_store_tag_index_follows_eviction_and_invalidate():
    s = MemoryStore(maxsize=1)

    await s.set("a", 1, StoreOptions(tags=("red", "blue")))
    await s.set("b", 2, StoreOptions(tags=("red",)))

    # "a" was evicted; its tag memberships went with it
    assert getattr(s, "_tags") == {"red": {"b"}}
    assert getattr(s, "_key_tags") == {"b": {"red"}}

    await s.invalidate(InvalidateOptions(tags=("red",)))

    assert getattr(s, "_tags") == {}
    assert getattr(s, "_key_tags") == {}
    assert len(s) == 0

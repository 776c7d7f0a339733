from .http_store import HttpStore
from .memory_store import MemoryStore
from .store_factory import get_default_store, get_store

__all__ = ["HttpStore", "MemoryStore", "get_default_store", "get_store"]

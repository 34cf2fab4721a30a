from clubs.stores.interfaces import KeyValueStorage
from clubs.stores.memory_store import InMemoryStorage
from clubs.stores.persisted_store import SESSION_KEY, Collection, PersistedStore

__all__ = [
    "KeyValueStorage",
    "InMemoryStorage",
    "PersistedStore",
    "Collection",
    "SESSION_KEY",
]

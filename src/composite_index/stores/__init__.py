"""Storage backends for index entries."""

from composite_index.stores.base import Store
from composite_index.stores.memory import InMemoryStore

__all__ = ["InMemoryStore", "Store"]

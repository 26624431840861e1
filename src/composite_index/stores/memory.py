"""InMemoryStore — zero-config, dict-backed storage for development and testing."""

from __future__ import annotations

from composite_index.exceptions import StoreKeyNotFoundError
from composite_index.stores.base import Store


class InMemoryStore(Store):
    """In-memory store using a flat dict.  Data is lost on process exit."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    async def get(self, key: str) -> str:
        try:
            return self._data[key]
        except KeyError:
            raise StoreKeyNotFoundError(key) from None

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    async def exists(self, key: str) -> bool:
        return key in self._data

    async def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def __len__(self) -> int:
        return len(self._data)

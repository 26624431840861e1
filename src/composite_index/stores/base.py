"""Store protocol — the key-value backend behind the index service."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Store(ABC):
    """Abstract base for all storage backends.

    The store knows nothing about composite keys.  It persists plain
    ``str`` values under flat ``str`` keys and signals absence on ``get``
    by raising :class:`~composite_index.exceptions.StoreKeyNotFoundError`.
    Any other backend failure should surface as
    :class:`~composite_index.exceptions.StoreError`.
    """

    @abstractmethod
    async def get(self, key: str) -> str:
        """Return the stored value, raising ``StoreKeyNotFoundError`` if absent."""
        ...

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Create or overwrite a value."""
        ...

    @abstractmethod
    async def exists(self, key: str) -> bool:
        """Return ``True`` if the key exists."""
        ...

    @abstractmethod
    async def remove(self, key: str) -> None:
        """Delete a value."""
        ...

    async def close(self) -> None:  # noqa: B027
        """Release backend resources.  No-op by default."""

"""IndexService — maps composite keys to values on top of a Store."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from composite_index._internal.once import Once
from composite_index.config import ServiceConfig, create_store
from composite_index.exceptions import IndexConfigError, NotFoundError, StoreKeyNotFoundError
from composite_index.keys import compose_key, validate_key_parts

if TYPE_CHECKING:
    from composite_index.stores.base import Store

logger = logging.getLogger(__name__)


class IndexService:
    """Create-if-absent / update-if-present index over an injected store.

    Every operation addresses one entry through the composite key
    ``namespace:namespace_a:namespace_b:value_a``.  Only the not-found
    condition gets special treatment: store absence becomes
    :class:`NotFoundError`, every other store error propagates unchanged.

    ``boot()`` and ``shutdown()`` are one-shot and thread-safe.  CRUD
    operations do not require ``boot()``, and ``shutdown()`` leaves the
    store open since its lifecycle belongs to whoever created it.

    Parameters:
        store:       Backend holding the entries.  Required.
        strict_keys: Reject key parts that contain the key delimiter.
    """

    def __init__(self, store: Store, *, strict_keys: bool = False) -> None:
        if store is None:
            raise IndexConfigError("store must not be empty")
        self._store = store
        self._strict_keys = strict_keys

        self._boot_once = Once()
        self._shutdown_once = Once()
        self._closed = threading.Event()

    @classmethod
    def from_config(cls, config: ServiceConfig) -> IndexService:
        """Build a service and its store from a :class:`ServiceConfig`."""
        return cls(create_store(config.store), strict_keys=config.strict_keys)

    # ── lifecycle ────────────────────────────────────────────

    def boot(self) -> None:
        self._boot_once.run(self._on_boot)

    def shutdown(self) -> None:
        self._shutdown_once.run(self._on_shutdown)

    def _on_boot(self) -> None:
        logger.debug("index service booted")

    def _on_shutdown(self) -> None:
        self._closed.set()
        logger.debug("index service shut down")

    @property
    def booted(self) -> bool:
        return self._boot_once.done

    @property
    def is_shut_down(self) -> bool:
        return self._closed.is_set()

    def wait_closed(self, timeout: float | None = None) -> bool:
        """Block until ``shutdown()`` has been called.  Returns ``False`` on timeout."""
        return self._closed.wait(timeout)

    @property
    def store(self) -> Store:
        return self._store

    # ── operations ───────────────────────────────────────────

    def key(self, namespace: str, namespace_a: str, namespace_b: str, value_a: str) -> str:
        """Return the storage key for the given parts."""
        if self._strict_keys:
            validate_key_parts(namespace, namespace_a, namespace_b, value_a)
        return compose_key(namespace, namespace_a, namespace_b, value_a)

    async def create(
        self,
        namespace: str,
        namespace_a: str,
        namespace_b: str,
        value_a: str,
        value_b: str,
    ) -> None:
        """Map the key to *value_b* unless an entry already exists.

        An existing entry is left untouched; use :meth:`update` to change it.
        """
        key = self.key(namespace, namespace_a, namespace_b, value_a)

        if await self._store.exists(key):
            logger.debug("create skipped, entry exists: %s", key)
            return

        await self._store.set(key, value_b)

    async def update(
        self,
        namespace: str,
        namespace_a: str,
        namespace_b: str,
        value_a: str,
        value_b: str,
    ) -> None:
        """Overwrite an existing entry.  Raises :class:`NotFoundError` if absent."""
        key = self.key(namespace, namespace_a, namespace_b, value_a)

        if not await self._store.exists(key):
            raise NotFoundError(key)

        await self._store.set(key, value_b)

    async def delete(self, namespace: str, namespace_a: str, namespace_b: str, value_a: str) -> None:
        key = self.key(namespace, namespace_a, namespace_b, value_a)
        await self._store.remove(key)

    async def search(self, namespace: str, namespace_a: str, namespace_b: str, value_a: str) -> str:
        """Return the value mapped to the key.  Raises :class:`NotFoundError` if absent."""
        key = self.key(namespace, namespace_a, namespace_b, value_a)

        try:
            return await self._store.get(key)
        except StoreKeyNotFoundError as exc:
            raise NotFoundError(key) from exc

    async def exists(self, namespace: str, namespace_a: str, namespace_b: str, value_a: str) -> bool:
        try:
            await self.search(namespace, namespace_a, namespace_b, value_a)
        except NotFoundError:
            return False
        return True

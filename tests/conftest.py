"""Shared test fixtures."""

import pytest

from composite_index import IndexService, StoreError
from composite_index.stores import InMemoryStore, Store


class FailingStore(Store):
    """Store whose every call fails with a backend error."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    async def get(self, key):
        self.calls.append("get")
        raise StoreError("get", "connection refused")

    async def set(self, key, value):
        self.calls.append("set")
        raise StoreError("set", "connection refused")

    async def exists(self, key):
        self.calls.append("exists")
        raise StoreError("exists", "connection refused")

    async def remove(self, key):
        self.calls.append("remove")
        raise StoreError("remove", "connection refused")


class WriteFailingStore(InMemoryStore):
    """In-memory store whose writes fail after a successful existence check."""

    async def set(self, key, value):
        raise StoreError("set", "disk full")


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def service(store):
    return IndexService(store)


@pytest.fixture
def failing_store():
    return FailingStore()


@pytest.fixture
def write_failing_store():
    return WriteFailingStore()

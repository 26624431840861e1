# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Configuration schemas and factories.

These Pydantic models describe how to build an :class:`IndexService` from a
plain mapping (e.g. parsed YAML or JSON).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from composite_index.exceptions import IndexConfigError
from composite_index.stores.memory import InMemoryStore

if TYPE_CHECKING:
    from composite_index.stores.base import Store


class StoreConfigSchema(BaseModel):
    """Store backend configuration.

    Attributes:
        type: Store type ("memory" or "sqlite")
        path: Path to SQLite database file (for sqlite type)
    """

    type: str = "memory"
    path: str = ""


class ServiceConfig(BaseModel):
    """Index service configuration.

    Attributes:
        store: Backend the service reads and writes
        strict_keys: Reject key parts containing the key delimiter
    """

    store: StoreConfigSchema = Field(default_factory=StoreConfigSchema)
    strict_keys: bool = False


def create_store(config: StoreConfigSchema) -> Store:
    """Instantiate the store described by *config*."""
    if config.type == "memory":
        return InMemoryStore()
    if config.type == "sqlite":
        from composite_index.stores.sqlite import SQLiteStore

        return SQLiteStore(config.path) if config.path else SQLiteStore()
    raise IndexConfigError(f"unknown store type '{config.type}'. Available: memory, sqlite")

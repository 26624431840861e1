"""composite_index — a composite-key index over a key-value store.

Four string parts make one key, each key maps to one string value.
Create never overwrites, update never creates.
"""

from composite_index.config import ServiceConfig, StoreConfigSchema, create_store
from composite_index.exceptions import (
    IndexConfigError,
    IndexServiceError,
    InvalidKeyPartError,
    NotFoundError,
    StoreError,
    StoreKeyNotFoundError,
    is_not_found,
)
from composite_index.keys import KEY_DELIMITER, compose_key
from composite_index.service import IndexService

__all__ = [
    "KEY_DELIMITER",
    "IndexConfigError",
    "IndexService",
    "IndexServiceError",
    "InvalidKeyPartError",
    "NotFoundError",
    "ServiceConfig",
    "StoreConfigSchema",
    "StoreError",
    "StoreKeyNotFoundError",
    "compose_key",
    "create_store",
    "is_not_found",
]

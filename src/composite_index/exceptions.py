"""Custom exceptions for the composite_index package."""

from __future__ import annotations


class IndexServiceError(Exception):
    """Base exception for all index-related errors."""


class IndexConfigError(IndexServiceError):
    """Raised when the service or one of its stores is misconfigured."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Index service misconfigured: {message}")


class InvalidKeyPartError(IndexServiceError, ValueError):
    """Raised in strict mode when a key part contains the key delimiter."""

    def __init__(self, part: str, delimiter: str) -> None:
        self.part = part
        self.delimiter = delimiter
        super().__init__(f"Key part {part!r} must not contain {delimiter!r}")


class NotFoundError(IndexServiceError):
    """Raised when a composite key has no entry."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Index entry not found: {key}")


class StoreError(IndexServiceError):
    """Raised when a store operation fails."""

    def __init__(self, operation: str, detail: str = "") -> None:
        self.operation = operation
        msg = f"Store error during '{operation}'"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class StoreKeyNotFoundError(StoreError):
    """Raised by ``Store.get`` when the key is absent."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__("get", f"key not found: {key}")


def is_not_found(exc: BaseException | None) -> bool:
    """Return ``True`` if *exc* signals an absent key, at any layer."""
    return isinstance(exc, (NotFoundError, StoreKeyNotFoundError))

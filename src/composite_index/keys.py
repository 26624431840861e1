"""Composite key composition.

A composite key is the ordered tuple ``(namespace, namespace_a, namespace_b,
value_a)``.  Every service operation goes through :func:`compose_key` so that
create, update, search, delete and exists address the same entry for the
same inputs.

The parts are joined without escaping.  Two tuples collide when a part
contains :data:`KEY_DELIMITER`; callers that cannot rule this out should run
the service with ``strict_keys=True``.
"""

from __future__ import annotations

from composite_index.exceptions import InvalidKeyPartError

KEY_DELIMITER = ":"


def compose_key(namespace: str, namespace_a: str, namespace_b: str, value_a: str) -> str:
    """Join the four key parts into a single storage key."""
    return KEY_DELIMITER.join((namespace, namespace_a, namespace_b, value_a))


def validate_key_parts(*parts: str) -> None:
    """Raise :class:`InvalidKeyPartError` for the first part holding the delimiter."""
    for part in parts:
        if KEY_DELIMITER in part:
            raise InvalidKeyPartError(part, KEY_DELIMITER)

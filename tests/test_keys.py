"""Tests for composite key composition."""

import pytest

from composite_index import KEY_DELIMITER, InvalidKeyPartError, compose_key
from composite_index.keys import validate_key_parts


def test_compose_joins_in_order():
    assert compose_key("ns", "a", "b", "v") == "ns:a:b:v"


def test_compose_is_deterministic():
    assert compose_key("ns", "a", "b", "v") == compose_key("ns", "a", "b", "v")


@pytest.mark.parametrize(
    "parts",
    [
        ("ns2", "a", "b", "v"),
        ("ns", "a2", "b", "v"),
        ("ns", "a", "b2", "v"),
        ("ns", "a", "b", "v2"),
        ("a", "ns", "b", "v"),
    ],
)
def test_distinct_parts_give_distinct_keys(parts):
    assert compose_key(*parts) != compose_key("ns", "a", "b", "v")


def test_empty_parts_kept():
    assert compose_key("", "", "", "") == KEY_DELIMITER * 3


def test_delimiter_collision_is_possible():
    assert compose_key("ns", "a:b", "c", "d") == compose_key("ns", "a", "b:c", "d")


def test_validate_accepts_plain_parts():
    validate_key_parts("ns", "a", "b", "v")


def test_validate_rejects_delimiter():
    with pytest.raises(InvalidKeyPartError, match="must not contain"):
        validate_key_parts("ns", "a", "b:c", "v")


def test_invalid_part_is_value_error():
    with pytest.raises(ValueError):
        validate_key_parts("x:y")

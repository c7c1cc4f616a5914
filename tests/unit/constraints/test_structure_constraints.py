"""
stannum — unit tests for extra-key and extra-item constraints

File: tests/unit/constraints/test_structure_constraints.py

Purpose
- Validate the structural constraints contracts register to reject
  undeclared keys, surplus items and surplus call parameters.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import pytest

from stannum.constraints import (
    ExtraArgumentsConstraint,
    ExtraItemsConstraint,
    ExtraKeysConstraint,
    ExtraKeywordsConstraint,
)
from stannum.exceptions import InvalidArgumentError


def test_extra_keys_reports_one_root_record_listing_keys_in_order() -> None:
    constraint = ExtraKeysConstraint(["name"])

    assert constraint.matches({"name": "Alan"}) is True
    assert constraint.errors_for({"role": 1, "name": "Alan", "id": 2}) == [
        {"type": "stannum.constraints.hashes.extra_keys", "data": {"keys": ["role", "id"]}}
    ]
    assert constraint.does_not_match({"role": 1}) is True
    assert constraint.does_not_match({"name": "Alan"}) is False


def test_extra_keys_reads_callable_sources_on_every_check() -> None:
    keys = ["name"]
    constraint = ExtraKeysConstraint(lambda: keys)

    assert constraint.matches({"role": 1}) is False

    keys.append("role")

    assert constraint.matches({"role": 1}) is True
    assert constraint.expected_keys == frozenset({"name", "role"})


def test_extra_keys_on_non_mappings() -> None:
    constraint = ExtraKeysConstraint(["name"])

    assert constraint.matches(["name"]) is False
    assert constraint.does_not_match(["name"]) is False
    assert constraint.errors_for(None) == [
        {"type": "stannum.constraints.is_not_type", "data": {"type": Mapping, "required": True}}
    ]


@pytest.mark.parametrize("expected_keys", ["name", [None], [1.5], [True]])
def test_extra_keys_rejects_invalid_key_sets(expected_keys: object) -> None:
    with pytest.raises(InvalidArgumentError):
        ExtraKeysConstraint(expected_keys)  # type: ignore[arg-type]


def test_extra_keys_equality_compares_resolved_keys() -> None:
    assert ExtraKeysConstraint(["a", "b"]) == ExtraKeysConstraint(("b", "a"))
    assert ExtraKeysConstraint(["a"]) == ExtraKeysConstraint(lambda: ["a"])
    assert ExtraKeysConstraint(["a"]) != ExtraKeysConstraint(["b"])


def test_extra_items_reports_each_surplus_item_at_its_index() -> None:
    constraint = ExtraItemsConstraint(2)

    assert constraint.matches(("a", "b")) is True
    assert constraint.errors_for(["a", "b", "c", None]) == [
        {"type": "stannum.constraints.tuples.extra_items", "data": {"value": "c"}, "path": [2]},
        {"type": "stannum.constraints.tuples.extra_items", "data": {"value": None}, "path": [3]},
    ]


def test_extra_items_on_non_sequences() -> None:
    constraint = ExtraItemsConstraint(lambda: 0)

    assert constraint.matches("abc") is False
    assert constraint.does_not_match("abc") is False
    assert constraint.errors_for("abc") == [
        {"type": "stannum.constraints.is_not_type", "data": {"type": Sequence, "required": True}}
    ]


@pytest.mark.parametrize("expected_count", [-1, True, "2", 1.0])
def test_extra_items_rejects_invalid_counts(expected_count: object) -> None:
    with pytest.raises(InvalidArgumentError):
        ExtraItemsConstraint(expected_count)  # type: ignore[arg-type]


def test_parameter_variants_use_parameter_vocabulary() -> None:
    assert ExtraArgumentsConstraint(0).errors_for(["a"]) == [
        {
            "type": "stannum.constraints.parameters.extra_arguments",
            "data": {"value": "a"},
            "path": [0],
        }
    ]
    assert ExtraKeywordsConstraint(()).errors_for({"flag": True}) == [
        {"type": "stannum.constraints.parameters.extra_keywords", "data": {"keys": ["flag"]}}
    ]

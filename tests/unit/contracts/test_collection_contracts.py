"""
stannum — unit tests for hash, tuple and array contracts

File: tests/unit/contracts/test_collection_contracts.py

Purpose
- Validate key- and index-scoped contracts with their structural sanity
  checks and extra-key/extra-item rules.
"""

from __future__ import annotations

from collections.abc import Mapping

import pytest

from stannum.constraints import PresenceConstraint, TypeConstraint
from stannum.contracts import ArrayContract, HashContract, TupleContract
from stannum.exceptions import InvalidArgumentError


def _name_contract(**options: object) -> HashContract:
    return HashContract(**options).add_key_constraint("name", PresenceConstraint())


def test_hash_contract_rejects_extra_keys() -> None:
    contract = _name_contract()

    assert contract.matches({"name": "x"}) is True
    assert contract.matches({"name": "x", "extra": 1}) is False
    assert contract.errors_for({"name": "x", "extra": 1}) == [
        {"type": "stannum.constraints.hashes.extra_keys", "data": {"keys": ["extra"]}}
    ]


def test_hash_contract_allow_extra_keys() -> None:
    contract = _name_contract(allow_extra_keys=True)

    assert contract.matches({"name": "x", "extra": 1}) is True
    assert contract.errors_for({"extra": 1}) == [
        {"type": "stannum.constraints.absent", "path": ["name"]}
    ]


def test_hash_contract_sanity_check_short_circuits_on_non_mappings() -> None:
    assert _name_contract().errors_for(["name"]) == [
        {
            "type": "stannum.constraints.is_not_type",
            "data": {"type": Mapping, "required": True},
        }
    ]


def test_hash_contract_key_type_is_checked_before_key_constraints() -> None:
    contract = HashContract(key_type=str, allow_extra_keys=True).add_key_constraint(
        "name", PresenceConstraint()
    )

    assert contract.errors_for({1: "x"}) == [
        {"type": "stannum.constraints.types.hash.invalid_key", "data": {"keys": [1]}}
    ]


def test_hash_contract_expected_keys_follow_declarations() -> None:
    contract = HashContract()
    contract.add_key_constraint("name", PresenceConstraint())
    contract.add_key_constraint(["address", "city"], TypeConstraint(str))
    contract.add_key_constraint(["address", "zip"], TypeConstraint(str))

    assert contract.expected_keys() == ["name", "address"]
    assert contract.matches({"name": "x", "address": {"city": "a", "zip": "b"}}) is True


def test_nested_hash_contracts_report_scoped_paths() -> None:
    address = HashContract().add_key_constraint("city", TypeConstraint(str))
    contract = HashContract().add_key_constraint("address", address)

    assert contract.errors_for({"address": {"city": 1, "zip": 2}}) == [
        {
            "type": "stannum.constraints.is_not_type",
            "data": {"type": str, "required": True},
            "path": ["address", "city"],
        },
        {
            "type": "stannum.constraints.hashes.extra_keys",
            "data": {"keys": ["zip"]},
            "path": ["address"],
        },
    ]


def test_hash_contract_options_are_fixed() -> None:
    with pytest.raises(InvalidArgumentError, match="cannot change option 'allow_extra_keys'"):
        _name_contract().with_options(allow_extra_keys=True)


def test_hash_contract_copy_keeps_its_own_expected_keys() -> None:
    original = _name_contract()

    duplicate = original.copy()
    duplicate.add_key_constraint("role", PresenceConstraint())

    assert duplicate.matches({"name": "x", "role": "admin"}) is True
    assert original.matches({"name": "x", "role": "admin"}) is False
    assert original == _name_contract()


def test_tuple_contract_validates_items_and_surplus() -> None:
    contract = TupleContract().add_index_constraint(0, TypeConstraint(str))

    assert contract.expected_count() == 1
    assert contract.matches(["a"]) is True
    assert contract.matches(("a",)) is True
    assert contract.errors_for(["a", "b", 3]) == [
        {"type": "stannum.constraints.tuples.extra_items", "data": {"value": "b"}, "path": [1]},
        {"type": "stannum.constraints.tuples.extra_items", "data": {"value": 3}, "path": [2]},
    ]
    assert contract.errors_for([]) == [
        {
            "type": "stannum.constraints.is_not_type",
            "data": {"type": str, "required": True},
            "path": [0],
        }
    ]


def test_tuple_contract_rejects_strings_and_allows_extra_items() -> None:
    contract = TupleContract().add_index_constraint(0, TypeConstraint(str))
    relaxed = TupleContract(allow_extra_items=True).add_index_constraint(0, TypeConstraint(str))

    assert contract.matches("a") is False
    assert relaxed.matches(["a", "b", "c"]) is True


@pytest.mark.parametrize("index", [-1, [0, 1], "0", True])
def test_tuple_contract_rejects_invalid_indices(index: object) -> None:
    with pytest.raises(InvalidArgumentError, match="invalid property name"):
        TupleContract().add_index_constraint(index, PresenceConstraint())  # type: ignore[arg-type]


def test_tuple_contract_copy_counts_its_own_indices() -> None:
    original = TupleContract().add_index_constraint(0, TypeConstraint(str))

    duplicate = original.copy()
    duplicate.add_index_constraint(1, TypeConstraint(int))

    assert duplicate.matches(["a", 1]) is True
    assert original.matches(["a", 1]) is False
    with pytest.raises(InvalidArgumentError, match="cannot change option 'allow_extra_items'"):
        original.with_options(allow_extra_items=True)


def test_array_contract_checks_item_type_before_indices() -> None:
    contract = ArrayContract(item_type=int, allow_extra_items=True).add_index_constraint(
        0, PresenceConstraint()
    )

    assert contract.matches([1, 2]) is True
    assert contract.matches((1, 2)) is False
    assert contract.errors_for([1, "a"]) == [
        {
            "type": "stannum.constraints.is_not_type",
            "data": {"type": int, "required": True},
            "path": [1],
        }
    ]
    with pytest.raises(InvalidArgumentError, match="cannot change option 'item_type'"):
        contract.with_options(item_type=str)

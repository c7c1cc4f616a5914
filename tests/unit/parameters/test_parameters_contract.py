"""
stannum — unit tests for call parameter contracts

File: tests/unit/parameters/test_parameters_contract.py

Purpose
- Validate positional, keyword and block parameter contracts.

What this test file should cover
- Declared arguments and keywords, including defaults.
- Variadic argument and keyword slots, set exactly once.
- The one-shot block constraint and the overall signature sanity check.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest

from stannum.constraints import AnythingConstraint, PresenceConstraint, TypeConstraint
from stannum.contracts import (
    ArgumentsContract,
    KeywordsContract,
    ParametersContract,
    SignatureContract,
)
from stannum.contracts.parameters import UNDEFINED
from stannum.exceptions import ContractDefinitionError, InvalidArgumentError


def _params(
    arguments: list[object] | None = None,
    keywords: dict[str, object] | None = None,
    block: Callable[..., object] | None = None,
) -> dict[str, object]:
    return {"arguments": arguments or [], "keywords": keywords or {}, "block": block}


def test_undefined_marker() -> None:
    assert repr(UNDEFINED) == "UNDEFINED"
    assert not UNDEFINED


def test_arguments_contract_declares_sequential_arguments() -> None:
    contract = ArgumentsContract().add_argument_constraint(None, str).add_argument_constraint(
        None, int
    )

    assert contract.expected_count() == 2
    assert contract.matches(["a", 1]) is True
    assert contract.errors_for(["a", "b"]) == [
        {
            "type": "stannum.constraints.is_not_type",
            "data": {"type": int, "required": True},
            "path": [1],
        }
    ]


def test_arguments_contract_missing_arguments_and_defaults() -> None:
    contract = (
        ArgumentsContract()
        .add_argument_constraint(0, str)
        .add_argument_constraint(1, int, default=True)
    )

    assert contract.matches(["a"]) is True
    assert contract.errors_for([]) == [
        {
            "type": "stannum.constraints.is_not_type",
            "data": {"type": str, "required": True},
            "path": [0],
        }
    ]
    assert contract.errors_for(["a", None]) == [
        {
            "type": "stannum.constraints.is_not_type",
            "data": {"type": int, "required": True},
            "path": [1],
        }
    ]


def test_arguments_contract_rejects_surplus_arguments_by_default() -> None:
    contract = ArgumentsContract().add_argument_constraint(None, str)

    assert contract.errors_for(["a", "b", "c"]) == [
        {
            "type": "stannum.constraints.parameters.extra_arguments",
            "data": {"value": "b"},
            "path": [1],
        },
        {
            "type": "stannum.constraints.parameters.extra_arguments",
            "data": {"value": "c"},
            "path": [2],
        },
    ]


def test_arguments_variadic_item_constraint_reports_original_indices() -> None:
    contract = ArgumentsContract().add_argument_constraint(None, str)
    contract.set_variadic_item_constraint(int, label="numbers")

    assert contract.allow_extra_items is True
    assert contract.matches(["a", 1, 2]) is True
    assert contract.errors_for(["a", 1, "x"]) == [
        {
            "type": "stannum.constraints.is_not_type",
            "data": {"type": int, "required": True},
            "path": [2],
        }
    ]
    variadic = [d for d in contract.each_constraint() if d.options.get("variadic")]
    assert [definition.property_name for definition in variadic] == ["numbers"]


def test_arguments_variadic_constraint_is_one_shot() -> None:
    contract = ArgumentsContract()
    contract.set_variadic_constraint(AnythingConstraint())

    with pytest.raises(ContractDefinitionError, match="variadic arguments constraint is already set"):
        contract.set_variadic_constraint(AnythingConstraint())
    with pytest.raises(InvalidArgumentError, match="must be an instance of Constraint"):
        ArgumentsContract().set_variadic_constraint(int)  # type: ignore[arg-type]


def test_arguments_contract_rejects_invalid_declarations() -> None:
    with pytest.raises(InvalidArgumentError, match="index must be an int"):
        ArgumentsContract().add_argument_constraint("0", str)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError, match="type must be a class or a constraint"):
        ArgumentsContract().add_argument_constraint(None, "str")  # type: ignore[arg-type]


def test_keywords_contract_declared_and_default_keywords() -> None:
    contract = (
        KeywordsContract()
        .add_keyword_constraint("name", str)
        .add_keyword_constraint("role", PresenceConstraint(), default=True)
    )

    assert contract.matches({"name": "Alan"}) is True
    assert contract.errors_for({}) == [
        {
            "type": "stannum.constraints.is_not_type",
            "data": {"type": str, "required": True},
            "path": ["name"],
        }
    ]
    assert contract.errors_for({"name": "Alan", "role": ""}) == [
        {"type": "stannum.constraints.absent", "path": ["role"]}
    ]


def test_keywords_contract_nested_key_paths_read_through_the_keyword() -> None:
    contract = KeywordsContract().add_key_constraint(("options", "verbose"), TypeConstraint(bool))

    assert contract.matches({"options": {"verbose": True}}) is True
    assert contract.errors_for({"options": {"verbose": "yes"}}) == [
        {
            "type": "stannum.constraints.is_not_type",
            "data": {"type": bool, "required": True},
            "path": ["options", "verbose"],
        }
    ]
    assert contract.matches({}) is False


def test_keywords_contract_rejects_undeclared_keywords_by_default() -> None:
    contract = KeywordsContract().add_keyword_constraint("name", str)

    assert contract.errors_for({"name": "Alan", "flag": True}) == [
        {"type": "stannum.constraints.parameters.extra_keywords", "data": {"keys": ["flag"]}}
    ]
    assert contract.errors_for({"name": "Alan", 1: True}) == [
        {"type": "stannum.constraints.types.hash.invalid_key", "data": {"keys": [1]}}
    ]


def test_keywords_variadic_value_constraint() -> None:
    contract = KeywordsContract().add_keyword_constraint("name", str)
    contract.set_variadic_value_constraint(int, label="options")

    assert contract.matches({"name": "Alan", "depth": 2}) is True
    assert contract.errors_for({"name": "Alan", "depth": "deep"}) == [
        {
            "type": "stannum.constraints.types.hash.invalid_value",
            "data": {"value": "deep"},
            "path": ["depth"],
        }
    ]
    with pytest.raises(ContractDefinitionError, match="variadic keywords constraint is already set"):
        contract.set_variadic_value_constraint(str)


def test_keywords_contract_requires_string_keywords() -> None:
    with pytest.raises(InvalidArgumentError, match="keyword must be a non-empty string"):
        KeywordsContract().add_keyword_constraint("", str)


def test_signature_contract_shape() -> None:
    contract = SignatureContract()

    assert contract.matches(_params()) is True
    assert contract.matches({"arguments": [], "keywords": {}}) is True
    assert contract.matches({"arguments": "abc", "keywords": {}}) is False
    assert contract.matches({"arguments": [], "keywords": {}, "other": 1}) is False


def test_parameters_contract_validates_arguments_and_keywords() -> None:
    contract = (
        ParametersContract()
        .add_argument_constraint(None, str, name="name")
        .add_keyword_constraint("role", str, default=True)
    )

    assert contract.matches(_params(["Alan"])) is True
    assert contract.matches(_params(["Alan"], {"role": "admin"})) is True
    assert contract.errors_for(_params([1], {"role": 2})) == [
        {
            "type": "stannum.constraints.is_not_type",
            "data": {"type": str, "required": True},
            "path": ["arguments", 0],
        },
        {
            "type": "stannum.constraints.is_not_type",
            "data": {"type": str, "required": True},
            "path": ["keywords", "role"],
        },
    ]
    names = [d.property_name for d in contract.arguments_contract.each_constraint()]
    assert "name" in names


def test_parameters_contract_sanity_check_rejects_malformed_parameters() -> None:
    contract = ParametersContract().add_argument_constraint(None, str)

    status, errors = contract.match({"arguments": "Alan", "keywords": {}})

    assert status is False
    assert [record.path for record in errors] == [("arguments",)]


def test_parameters_contract_variadic_slots() -> None:
    contract = (
        ParametersContract()
        .add_argument_constraint(None, str)
        .set_arguments_item_constraint("rest", int)
        .set_keywords_value_constraint("options", bool)
    )

    assert contract.matches(_params(["a", 1, 2], {"verbose": True})) is True
    assert contract.errors_for(_params(["a", "b"], {"verbose": "yes"})) == [
        {
            "type": "stannum.constraints.is_not_type",
            "data": {"type": int, "required": True},
            "path": ["arguments", 1],
        },
        {
            "type": "stannum.constraints.types.hash.invalid_value",
            "data": {"value": "yes"},
            "path": ["keywords", "verbose"],
        },
    ]


def test_parameters_contract_block_constraint_is_one_shot() -> None:
    required = ParametersContract().set_block_constraint(True)
    forbidden = ParametersContract().set_block_constraint(False)

    assert required.matches(_params(block=print)) is True
    assert required.errors_for(_params()) == [
        {
            "type": "stannum.constraints.is_not_type",
            "data": {"type": Callable, "required": True},
            "path": ["block"],
        }
    ]
    assert forbidden.matches(_params()) is True
    assert forbidden.matches(_params(block=print)) is False
    with pytest.raises(ContractDefinitionError, match="block constraint is already set"):
        required.set_block_constraint(False)
    with pytest.raises(InvalidArgumentError, match="present must be true or false"):
        ParametersContract().set_block_constraint("yes")  # type: ignore[arg-type]


def test_parameters_contract_without_block_constraint_ignores_block() -> None:
    contract = ParametersContract()

    assert contract.block_constraint is None
    assert contract.matches(_params(block=print)) is True

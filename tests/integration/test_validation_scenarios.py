"""
stannum — integration tests for end-to-end validation scenarios

File: tests/integration/test_validation_scenarios.py

Purpose
- Exercise constraints, contracts, message rendering and config together the
  way an application would.
"""

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from stannum.config import load_config, validate_config
from stannum.constraints import (
    ArrayType,
    EnumConstraint,
    FormatConstraint,
    PresenceConstraint,
    TypeConstraint,
)
from stannum.contracts import Contract, HashContract, ParametersContract
from stannum.messages import DefaultStrategy

REPO_ROOT = Path(__file__).resolve().parents[2]

pytestmark = pytest.mark.integration


def test_presence_constraint_scenario() -> None:
    constraint = PresenceConstraint()

    assert constraint.matches(None) is False
    assert constraint.matches("") is False
    assert constraint.matches("hi") is True
    assert constraint.errors_for(None).to_list() == [
        {"type": "stannum.constraints.absent", "message": None, "data": {}, "path": []}
    ]


def test_nested_property_scenario() -> None:
    contract = Contract().add_constraint(TypeConstraint(str), property=["address", "city"])

    errors = contract.errors_for(SimpleNamespace(address=SimpleNamespace(city=123)))

    records = list(errors)
    assert len(records) == 1
    assert records[0].path == ("address", "city")
    assert records[0].data == {"type": str, "required": True}


def test_user_payload_contract_with_rendered_messages() -> None:
    address = HashContract().add_key_constraint("city", PresenceConstraint())
    contract = (
        HashContract(key_type=str)
        .add_key_constraint("name", TypeConstraint(str))
        .add_key_constraint("email", FormatConstraint("@"))
        .add_key_constraint("role", EnumConstraint("admin", "member"))
        .add_key_constraint("tags", ArrayType(item_type=str))
        .add_key_constraint("address", address)
    )
    payload = {
        "name": "Alan",
        "email": "alan.example.com",
        "role": "owner",
        "tags": ["ops", 7],
        "address": {"city": ""},
        "nickname": "al",
    }

    matches, errors = contract.match(payload)
    rendered = {
        ".".join(str(key) for key in record.path): record.message
        for record in errors.with_messages(DefaultStrategy())
    }

    assert matches is False
    assert rendered == {
        "email": "does not match the expected format",
        "role": "is not in the list",
        "tags.1": "is not a str",
        "address.city": "is nil or empty",
        "": "has extra keys",
    }
    assert contract.matches(
        {
            "name": "Alan",
            "email": "alan@example.com",
            "role": "admin",
            "tags": [],
            "address": {"city": "Paris"},
        }
    )


def test_parameters_contract_end_to_end() -> None:
    contract = (
        ParametersContract()
        .add_argument_constraint(None, str, name="path")
        .add_keyword_constraint("encoding", str, default=True)
        .set_block_constraint(False)
    )

    assert contract.matches({"arguments": ["a.txt"], "keywords": {}, "block": None})
    errors = contract.errors_for(
        {"arguments": [], "keywords": {"mode": "r"}, "block": print}
    )
    assert sorted(record.path for record in errors) == [
        ("arguments", 0),
        ("block",),
        ("keywords",),
    ]


def test_repository_config_file_is_valid() -> None:
    loaded = load_config(REPO_ROOT / "stannum.toml", environ={})

    assert validate_config(loaded).is_valid
    strategy = DefaultStrategy.from_config(loaded)
    assert strategy("stannum.constraints.absent") == "is nil or empty"

"""
stannum — contract for a method's call parameters.

Purpose
- Validate ``{"arguments": [...], "keywords": {...}, "block": callable | None}``
  mappings, as produced by a parameter-validation wrapper around a callable.

Composition
- A ``SignatureContract`` sanity check validates the overall shape.
- ``arguments`` is validated by an ``ArgumentsContract`` and ``keywords`` by a
  ``KeywordsContract``; both are created with the contract and exposed as
  properties.
- The block constraint is optional and may be set exactly once.
"""

from __future__ import annotations

from typing import Any, Self, cast

from stannum.constraints.base import Constraint
from stannum.constraints.types import CallableType, NilType
from stannum.contracts.hash_contract import HashContract
from stannum.contracts.parameters.arguments_contract import ArgumentsContract
from stannum.contracts.parameters.keywords_contract import KeywordsContract
from stannum.contracts.parameters.signature_contract import SignatureContract
from stannum.exceptions import ContractDefinitionError
from stannum.support.coercion import presence_constraint


def _block_constraint(present: bool, **options: Any) -> Constraint:
    if present:
        return CallableType(**options)
    return NilType(**options)


class ParametersContract(HashContract):
    """Contract for ``arguments``/``keywords``/``block`` parameter mappings.

    >>> contract = ParametersContract().add_argument_constraint(None, str)
    >>> contract.matches({"arguments": ["Alan"], "keywords": {}, "block": None})
    True
    """

    def __init__(self, **options: Any) -> None:
        self._arguments_contract = ArgumentsContract()
        self._keywords_contract = KeywordsContract()
        self._block_constraint: Constraint | None = None
        super().__init__(**options)

    @property
    def arguments_contract(self) -> ArgumentsContract:
        return self._arguments_contract

    @property
    def block_constraint(self) -> Constraint | None:
        return self._block_constraint

    @property
    def keywords_contract(self) -> KeywordsContract:
        return self._keywords_contract

    def add_argument_constraint(
        self,
        index: int | None,
        expected: type | Constraint,
        *,
        name: str | None = None,
        default: bool = False,
        **options: Any,
    ) -> Self:
        if name is not None:
            options["property_name"] = name
        self._arguments_contract.add_argument_constraint(
            index, expected, default=default, **options
        )
        return self

    def add_keyword_constraint(
        self,
        keyword: str,
        expected: type | Constraint,
        *,
        default: bool = False,
        **options: Any,
    ) -> Self:
        self._keywords_contract.add_keyword_constraint(
            keyword, expected, default=default, **options
        )
        return self

    def set_arguments_item_constraint(self, name: str, item_type: type | Constraint) -> Self:
        self._arguments_contract.set_variadic_item_constraint(item_type, label=name)
        return self

    def set_block_constraint(self, present: bool | Constraint) -> Self:
        """Require (``True``), forbid (``False``) or constrain the block. One-shot."""

        if self._block_constraint is not None:
            raise ContractDefinitionError("block constraint is already set")
        constraint = cast(
            Constraint, presence_constraint(present, label="present", factory=_block_constraint)
        )
        self._block_constraint = constraint
        return self.add_key_constraint("block", constraint)

    def set_keywords_value_constraint(self, name: str, value_type: type | Constraint) -> Self:
        self._keywords_contract.set_variadic_value_constraint(value_type, label=name)
        return self

    def _add_extra_keys_constraint(self) -> None:
        return None

    def _add_type_constraint(self) -> None:
        self.add_constraint(SignatureContract(), sanity=True)

    def _define_constraints(self) -> None:
        super()._define_constraints()
        self.add_key_constraint("arguments", self._arguments_contract)
        self.add_key_constraint("keywords", self._keywords_contract)


__all__ = ["ParametersContract"]

"""
stannum — keyword arguments contract.

Behavior
- Each declared keyword is a key constraint on a ``str``-keyed mapping. A
  keyword declared with ``default=True`` may be omitted; an omitted keyword
  without a default is validated as ``None``.
- Undeclared keywords are collected into one mapping and validated by the
  variadic constraint, which rejects them all until
  ``set_variadic_constraint`` is called.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Self

from stannum.constraints.base import Constraint
from stannum.constraints.delegator import DelegatorConstraint
from stannum.constraints.parameters import ExtraKeywordsConstraint
from stannum.constraints.types import HashType
from stannum.contracts.definition import Definition
from stannum.contracts.hash_contract import HashContract
from stannum.contracts.parameters._undefined import UNDEFINED
from stannum.errors import Errors
from stannum.exceptions import ContractDefinitionError, InvalidArgumentError
from stannum.support.coercion import type_constraint


class KeywordsContract(HashContract):
    def __init__(self, **options: Any) -> None:
        options.pop("allow_extra_keys", None)
        super().__init__(allow_extra_keys=False, key_type=str, **options)

    @property
    def variadic_constraint(self) -> DelegatorConstraint:
        return self._variadic_definition().constraint  # type: ignore[return-value]

    def add_keyword_constraint(
        self,
        keyword: str,
        expected: type | Constraint,
        *,
        default: bool = False,
        **options: Any,
    ) -> Self:
        if not isinstance(keyword, str) or not keyword:
            raise InvalidArgumentError("keyword must be a non-empty string")
        constraint = type_constraint(expected)
        return self.add_key_constraint(keyword, constraint, default=bool(default), **options)

    def map_value(self, actual: object, **options: Any) -> Any:
        if not isinstance(actual, Mapping):
            return super().map_value(actual, **options)
        if options.get("variadic"):
            expected = set(self.expected_keys())
            return {key: value for key, value in actual.items() if key not in expected}
        key = options.get("property")
        if isinstance(key, tuple):
            key = key[0]
        if options.get("property_type") is not None and key not in actual:
            return UNDEFINED
        return super().map_value(actual, **options)

    def set_variadic_constraint(self, constraint: Constraint, *, label: str | None = None) -> Self:
        """Validate undeclared keywords, as a mapping, against ``constraint``. One-shot."""

        if self.allow_extra_keys:
            raise ContractDefinitionError("variadic keywords constraint is already set")
        if not isinstance(constraint, Constraint):
            raise InvalidArgumentError("must be an instance of Constraint")
        self._options["allow_extra_keys"] = True
        self.variadic_constraint.receiver = constraint
        if label is not None:
            definition = self._variadic_definition()
            index = self._trailing_definitions.index(definition)
            self._trailing_definitions[index] = definition.replace(property_name=label)
        return self

    def set_variadic_value_constraint(
        self, value_type: type | Constraint, *, label: str | None = None
    ) -> Self:
        value_constraint = type_constraint(value_type, label="value type")
        return self.set_variadic_constraint(
            HashType(key_type=str, value_type=value_constraint), label=label
        )

    def _add_errors_for(self, definition: Definition, value: Any, errors: Errors) -> Errors:
        return super()._add_errors_for(definition, None if value is UNDEFINED else value, errors)

    def _add_extra_keys_constraint(self) -> None:
        self._add_trailing_constraint(
            DelegatorConstraint(ExtraKeywordsConstraint(())), variadic=True
        )

    def _add_negated_errors_for(
        self, definition: Definition, value: Any, errors: Errors
    ) -> Errors:
        return super()._add_negated_errors_for(
            definition, None if value is UNDEFINED else value, errors
        )

    def _match_constraint(self, definition: Definition, value: Any) -> bool:
        if value is UNDEFINED:
            return bool(definition.options.get("default")) or definition.constraint.matches(None)
        return super()._match_constraint(definition, value)

    def _match_negated_constraint(self, definition: Definition, value: Any) -> bool:
        if value is UNDEFINED:
            if definition.options.get("default"):
                return False
            return definition.constraint.does_not_match(None)
        return super()._match_negated_constraint(definition, value)

    def _variadic_definition(self) -> Definition:
        for definition in self._trailing_definitions:
            if definition.options.get("variadic"):
                return definition
        raise ContractDefinitionError("variadic keywords definition is missing")


__all__ = ["KeywordsContract"]

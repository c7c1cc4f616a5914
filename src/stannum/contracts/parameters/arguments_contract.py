"""
stannum — positional arguments contract.

Behavior
- Each declared argument is an index constraint. An argument declared with
  ``default=True`` may be omitted; an omitted argument without a default is
  validated as ``None``.
- Items past the declared arguments are validated as one list by the variadic
  constraint. Until ``set_variadic_constraint`` is called that constraint
  rejects every surplus item; errors are reported at each item's original
  index.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from typing import Any, Self

from stannum.constraints.base import Constraint
from stannum.constraints.delegator import DelegatorConstraint
from stannum.constraints.parameters import ExtraArgumentsConstraint
from stannum.constraints.types import ArrayType
from stannum.contracts.definition import Definition
from stannum.contracts.parameters._undefined import UNDEFINED
from stannum.contracts.tuple_contract import TupleContract
from stannum.errors import Errors
from stannum.exceptions import ContractDefinitionError, InvalidArgumentError
from stannum.support.coercion import type_constraint


class ArgumentsContract(TupleContract):
    def __init__(self, **options: Any) -> None:
        options.pop("allow_extra_items", None)
        super().__init__(allow_extra_items=False, **options)

    @property
    def variadic_constraint(self) -> DelegatorConstraint:
        return self._variadic_definition().constraint  # type: ignore[return-value]

    def add_argument_constraint(
        self,
        index: int | None,
        expected: type | Constraint,
        *,
        default: bool = False,
        **options: Any,
    ) -> Self:
        """Declare the argument at ``index``, or at the next free index when ``None``."""

        if index is None:
            index = self.expected_count()
        elif isinstance(index, bool) or not isinstance(index, int):
            raise InvalidArgumentError("index must be an int")
        constraint = type_constraint(expected)
        return self.add_index_constraint(index, constraint, default=bool(default), **options)

    def map_value(self, actual: object, **options: Any) -> Any:
        if not _is_argument_list(actual):
            return super().map_value(actual, **options)
        if options.get("variadic"):
            return list(actual[self.expected_count() :])  # type: ignore[index]
        index = options.get("property")
        if isinstance(index, int) and index >= len(actual):  # type: ignore[arg-type]
            return UNDEFINED
        return super().map_value(actual, **options)

    def set_variadic_constraint(self, constraint: Constraint, *, label: str | None = None) -> Self:
        """Validate surplus arguments, as a list, against ``constraint``. One-shot."""

        if self.allow_extra_items:
            raise ContractDefinitionError("variadic arguments constraint is already set")
        if not isinstance(constraint, Constraint):
            raise InvalidArgumentError("must be an instance of Constraint")
        self._options["allow_extra_items"] = True
        self.variadic_constraint.receiver = constraint
        if label is not None:
            self._replace_variadic_definition(property_name=label)
        return self

    def set_variadic_item_constraint(
        self, item_type: type | Constraint, *, label: str | None = None
    ) -> Self:
        item_constraint = type_constraint(item_type, label="item type")
        return self.set_variadic_constraint(ArrayType(item_type=item_constraint), label=label)

    def _add_errors_for(self, definition: Definition, value: Any, errors: Errors) -> Errors:
        if definition.options.get("variadic"):
            scoped = definition.constraint.update_errors_for(value, Errors())
            return self._shift_errors(scoped, errors)
        return super()._add_errors_for(definition, None if value is UNDEFINED else value, errors)

    def _add_extra_items_constraint(self) -> None:
        self._add_trailing_constraint(
            DelegatorConstraint(ExtraArgumentsConstraint(0)), variadic=True
        )

    def _add_negated_errors_for(
        self, definition: Definition, value: Any, errors: Errors
    ) -> Errors:
        if definition.options.get("variadic"):
            scoped = definition.constraint.update_negated_errors_for(value, Errors())
            return self._shift_errors(scoped, errors)
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

    def _replace_variadic_definition(self, **options: Any) -> None:
        definition = self._variadic_definition()
        index = self._trailing_definitions.index(definition)
        self._trailing_definitions[index] = definition.replace(**options)

    def _shift_errors(self, scoped: Errors, errors: Errors) -> Errors:
        offset = self.expected_count()
        for record in scoped:
            path = record.path
            if path and isinstance(path[0], int):
                path = (path[0] + offset, *path[1:])
            errors.update([replace(record, path=path)])
        return errors

    def _variadic_definition(self) -> Definition:
        for definition in self._trailing_definitions:
            if definition.options.get("variadic"):
                return definition
        raise ContractDefinitionError("variadic arguments definition is missing")


def _is_argument_list(actual: object) -> bool:
    return isinstance(actual, Sequence) and not isinstance(actual, (str, bytes, bytearray))


__all__ = ["ArgumentsContract"]

"""
stannum — base contract evaluation.

Purpose
- Hold an ordered collection of definitions (constraint + scoping options) and
  evaluate a candidate value against all of them, merging every failure into a
  single path-addressed ``Errors`` tree.

Evaluation order
- Definitions are enumerated sanity group first, then the normal group. Each
  group lists this contract's own definitions before those of included
  contracts, recursively, in inclusion order.
- The first failing sanity definition stops evaluation of the whole contract;
  only the errors gathered so far are reported.

Extension points
- ``map_value``/``map_errors`` scope the candidate and the error tree to a
  definition's property. ``_match_constraint``, ``_match_negated_constraint``,
  ``_add_errors_for`` and ``_add_negated_errors_for`` are always dispatched on
  the contract that owns the definition, so included contracts keep their own
  scoping rules.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Self

import structlog

from stannum.constants import PropertyType
from stannum.constraints.base import Constraint
from stannum.contracts.definition import Definition
from stannum.errors import Errors
from stannum.exceptions import InvalidArgumentError

logger = structlog.get_logger(__name__)


class BaseContract(Constraint):
    """A contract aggregates constraints about the given object.

    A contract is itself a constraint, so contracts can be nested as the
    constraint of another contract's definition or combined with ``include``.
    """

    def __init__(self, **options: Any) -> None:
        super().__init__(**options)
        self._definitions: list[Definition] = []
        self._trailing_definitions: list[Definition] = []
        self._included: list[BaseContract] = []
        self._define_constraints()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseContract):
            return NotImplemented
        if not super().__eq__(other):
            return False
        own = list(self._each_unscoped_constraint())
        theirs = list(other._each_unscoped_constraint())
        if len(own) != len(theirs):
            return False
        return all(
            mine.constraint == other_definition.constraint
            and dict(mine.options) == dict(other_definition.options)
            for mine, other_definition in zip(own, theirs, strict=True)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(options={self._options!r}, "
            f"definitions={len(self._definitions) + len(self._trailing_definitions)}, "
            f"included={len(self._included)})"
        )

    def add_constraint(
        self,
        constraint: Constraint,
        *,
        property: Any = None,
        sanity: bool = False,
        **options: Any,
    ) -> Self:
        """Register ``constraint`` scoped to ``property`` and return ``self``."""

        self._append_definition(
            self._definitions, constraint, property=property, sanity=sanity, **options
        )
        return self

    def does_not_match(self, actual: object) -> bool:
        """True when every definition fails, or when a sanity definition fails.

        A contract whose definitions partially match neither matches nor
        does-not-match.
        """

        for definition, value in self.each_pair(actual):
            if definition.contract._match_negated_constraint(definition, value):
                if definition.sanity:
                    return True
                continue
            return False
        return True

    def each_constraint(self) -> Iterator[Definition]:
        """Yield every definition, sanity group first; restartable per call."""

        definitions = list(self._each_unscoped_constraint())
        yield from (definition for definition in definitions if definition.sanity)
        yield from (definition for definition in definitions if not definition.sanity)

    def each_pair(self, actual: object) -> Iterator[tuple[Definition, Any]]:
        """Yield ``(definition, mapped value)`` pairs in evaluation order."""

        for definition in self.each_constraint():
            yield definition, definition.contract.map_value(actual, **definition.options)

    def include(self, other: BaseContract) -> Self:
        """Logically append ``other``'s definitions; later changes stay visible."""

        if not isinstance(other, BaseContract):
            raise InvalidArgumentError("must be an instance of BaseContract")
        if other is self or other._includes(self):
            raise InvalidArgumentError("cannot include a contract in itself")
        self._included.append(other)
        return self

    def map_errors(self, errors: Errors, **options: Any) -> Errors:
        return errors

    def map_value(self, actual: object, **options: Any) -> Any:
        return actual

    def match(self, actual: object) -> tuple[bool, Errors]:
        status = True
        errors = Errors()
        for definition, value in self.each_pair(actual):
            if definition.contract._match_constraint(definition, value):
                continue
            status = False
            definition.contract._add_errors_for(definition, value, errors)
            if definition.sanity:
                self._log_short_circuit(definition)
                return False, errors
        return status, errors

    def matches(self, actual: object) -> bool:
        for definition, value in self.each_pair(actual):
            if not definition.contract._match_constraint(definition, value):
                if definition.sanity:
                    self._log_short_circuit(definition)
                return False
        return True

    def negated_match(self, actual: object) -> tuple[bool, Errors]:
        status = True
        errors = Errors()
        for definition, value in self.each_pair(actual):
            if definition.contract._match_negated_constraint(definition, value):
                if definition.sanity:
                    return True, errors
                continue
            status = False
            definition.contract._add_negated_errors_for(definition, value, errors)
        return status, errors

    def update_errors_for(self, actual: object, errors: Errors) -> Errors:
        for definition, value in self.each_pair(actual):
            if definition.contract._match_constraint(definition, value):
                continue
            definition.contract._add_errors_for(definition, value, errors)
            if definition.sanity:
                self._log_short_circuit(definition)
                break
        return errors

    def update_negated_errors_for(self, actual: object, errors: Errors) -> Errors:
        for definition, value in self.each_pair(actual):
            if definition.contract._match_negated_constraint(definition, value):
                if definition.sanity:
                    break
                continue
            definition.contract._add_negated_errors_for(definition, value, errors)
        return errors

    def _add_errors_for(self, definition: Definition, value: Any, errors: Errors) -> Errors:
        return definition.constraint.update_errors_for(
            value, self.map_errors(errors, **definition.options)
        )

    def _add_negated_errors_for(
        self, definition: Definition, value: Any, errors: Errors
    ) -> Errors:
        return definition.constraint.update_negated_errors_for(
            value, self.map_errors(errors, **definition.options)
        )

    def _add_trailing_constraint(self, constraint: Constraint, **options: Any) -> Definition:
        """Register a structural definition that always follows the own definitions."""

        return self._append_definition(self._trailing_definitions, constraint, **options)

    def _append_definition(
        self,
        target: list[Definition],
        constraint: Constraint,
        *,
        property: Any = None,
        sanity: bool = False,
        **options: Any,
    ) -> Definition:
        if not isinstance(constraint, Constraint):
            raise InvalidArgumentError("must be an instance of Constraint")
        if options.get("property_type") is not None:
            options["property_type"] = _coerce_property_type(options["property_type"])
        self._validate_property(property=property, **options)
        if property is not None:
            options["property"] = tuple(property) if isinstance(property, list) else property
        definition = Definition(constraint, self, {**options, "sanity": bool(sanity)})
        target.append(definition)
        return definition

    def _copy_properties(self, source: Constraint) -> None:
        super()._copy_properties(source)
        if not isinstance(source, BaseContract):
            return
        self._definitions = [self._rebind(definition, source) for definition in source._definitions]
        self._trailing_definitions = [
            self._rebind(definition, source) for definition in source._trailing_definitions
        ]
        self._included = list(source._included)

    def _define_constraints(self) -> None:
        """Hook for subclasses to register their structural definitions."""

    def _each_unscoped_constraint(self) -> Iterator[Definition]:
        yield from self._definitions
        yield from self._trailing_definitions
        for contract in self._included:
            yield from contract.each_constraint()

    def _includes(self, other: BaseContract) -> bool:
        return any(
            contract is other or contract._includes(other) for contract in self._included
        )

    def _is_valid_property(
        self, *, property: Any, property_type: PropertyType | None = None, **options: Any
    ) -> bool:
        if property_type is PropertyType.INDEX:
            return _is_path(property, _is_index)
        if property_type is PropertyType.KEY:
            return _is_path(property, _is_key)
        return _is_path(property, _is_name)

    def _log_short_circuit(self, definition: Definition) -> None:
        logger.debug(
            "contract_sanity_short_circuit",
            contract=type(self).__name__,
            constraint=type(definition.constraint).__name__,
            property=definition.property_name,
        )

    def _match_constraint(self, definition: Definition, value: Any) -> bool:
        return definition.constraint.matches(value)

    def _match_negated_constraint(self, definition: Definition, value: Any) -> bool:
        return definition.constraint.does_not_match(value)

    def _rebind(self, definition: Definition, source: BaseContract) -> Definition:
        constraint = self._rebind_constraint(definition.constraint, source)
        return Definition(constraint, self, definition.options)

    def _rebind_constraint(self, constraint: Constraint, source: BaseContract) -> Constraint:
        """Return the constraint a copied contract should use in place of ``constraint``."""

        return constraint

    def _validate_property(self, *, property: Any = None, **options: Any) -> None:
        if property is None:
            return
        if not self._is_valid_property(property=property, **options):
            raise InvalidArgumentError(f"invalid property name {property!r}")


def _coerce_property_type(value: object) -> PropertyType:
    try:
        return PropertyType(value)
    except ValueError:
        raise InvalidArgumentError(f"invalid property type {value!r}") from None


def _is_index(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _is_key(value: object) -> bool:
    if isinstance(value, str):
        return bool(value)
    return isinstance(value, int) and not isinstance(value, bool)


def _is_name(value: object) -> bool:
    return isinstance(value, str) and bool(value)


def _is_path(property: object, predicate: Callable[[object], bool]) -> bool:
    if isinstance(property, (list, tuple)):
        return bool(property) and all(predicate(segment) for segment in property)
    return bool(predicate(property))


__all__ = ["BaseContract"]

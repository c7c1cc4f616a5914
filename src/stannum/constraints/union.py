"""Constraint matching when any one of several constraints matches."""

from __future__ import annotations

from typing import Any

from stannum.constraints.base import Constraint
from stannum.errors import Errors
from stannum.exceptions import InvalidArgumentError


class UnionConstraint(Constraint):
    TYPE = "stannum.constraints.is_not_in_union"
    NEGATED_TYPE = "stannum.constraints.is_in_union"
    CONFIGURATION_OPTIONS = frozenset({"expected_constraints"})

    def __init__(self, first: Constraint, *rest: Constraint, **options: Any) -> None:
        expected = (first, *rest)
        for constraint in expected:
            if not isinstance(constraint, Constraint):
                raise InvalidArgumentError("expected constraints must be Constraints")
        super().__init__(expected_constraints=expected, **options)

    @property
    def expected_constraints(self) -> tuple[Constraint, ...]:
        return self._options["expected_constraints"]

    def matches(self, actual: object) -> bool:
        return any(constraint.matches(actual) for constraint in self.expected_constraints)

    def update_errors_for(self, actual: object, errors: Errors) -> Errors:
        constraints = [
            {"options": dict(constraint.options), "type": constraint.type}
            for constraint in self.expected_constraints
        ]
        return errors.add(
            self.type,
            message=self.message,
            **{**self.error_properties(), "constraints": constraints},
        )

    def update_negated_errors_for(self, actual: object, errors: Errors) -> Errors:
        constraints = [
            {"negated_type": constraint.negated_type, "options": dict(constraint.options)}
            for constraint in self.expected_constraints
        ]
        return errors.add(
            self.negated_type,
            message=self.negated_message,
            **{**self.error_properties(), "constraints": constraints},
        )


__all__ = ["UnionConstraint"]

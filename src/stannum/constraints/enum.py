"""Constraint matching one of a fixed list of values."""

from __future__ import annotations

from typing import Any

from stannum.constraints.base import Constraint
from stannum.exceptions import InvalidArgumentError


class EnumConstraint(Constraint):
    TYPE = "stannum.constraints.is_not_in_list"
    NEGATED_TYPE = "stannum.constraints.is_in_list"
    CONFIGURATION_OPTIONS = frozenset({"expected_values"})

    def __init__(self, *expected_values: Any, **options: Any) -> None:
        if not expected_values:
            raise InvalidArgumentError("expected values must not be empty")
        super().__init__(expected_values=tuple(expected_values), **options)

    @property
    def expected_values(self) -> tuple[Any, ...]:
        return self._options["expected_values"]

    def error_properties(self) -> dict[str, Any]:
        return {**super().error_properties(), "values": list(self.expected_values)}

    def matches(self, actual: object) -> bool:
        return any(value == actual for value in self.expected_values)


__all__ = ["EnumConstraint"]

"""Constraints comparing against an expected value by equality or identity."""

from __future__ import annotations

from typing import Any

from stannum.constraints.base import Constraint


class EqualityConstraint(Constraint):
    """Matches objects equal to the expected value."""

    TYPE = "stannum.constraints.is_not_equal_to"
    NEGATED_TYPE = "stannum.constraints.is_equal_to"

    def __init__(self, expected_value: Any, **options: Any) -> None:
        super().__init__(expected_value=expected_value, **options)

    @property
    def expected_value(self) -> Any:
        return self._options["expected_value"]

    def matches(self, actual: object) -> bool:
        return bool(self.expected_value == actual)


class IdentityConstraint(Constraint):
    """Matches only the expected object itself."""

    TYPE = "stannum.constraints.is_not_value"
    NEGATED_TYPE = "stannum.constraints.is_value"

    def __init__(self, expected_value: Any, **options: Any) -> None:
        super().__init__(expected_value=expected_value, **options)

    @property
    def expected_value(self) -> Any:
        return self._options["expected_value"]

    def matches(self, actual: object) -> bool:
        return self.expected_value is actual


__all__ = ["EqualityConstraint", "IdentityConstraint"]

"""Constraint matching only ``True`` or ``False``."""

from __future__ import annotations

from stannum.constraints.base import Constraint


class BooleanConstraint(Constraint):
    TYPE = "stannum.constraints.is_not_boolean"
    NEGATED_TYPE = "stannum.constraints.is_boolean"

    def matches(self, actual: object) -> bool:
        return actual is True or actual is False


__all__ = ["BooleanConstraint"]

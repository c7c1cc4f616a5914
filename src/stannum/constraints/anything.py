"""Constraints that match every value or no value."""

from __future__ import annotations

from stannum.constraints.base import Constraint

ANYTHING_TYPE = "stannum.constraints.anything"
NOTHING_TYPE = "stannum.constraints.nothing"


class AnythingConstraint(Constraint):
    """Matches any object, including None."""

    TYPE = NOTHING_TYPE
    NEGATED_TYPE = ANYTHING_TYPE

    def matches(self, actual: object) -> bool:
        return True


class NothingConstraint(Constraint):
    """Matches no object."""

    TYPE = ANYTHING_TYPE
    NEGATED_TYPE = NOTHING_TYPE

    def matches(self, actual: object) -> bool:
        return False


__all__ = ["ANYTHING_TYPE", "NOTHING_TYPE", "AnythingConstraint", "NothingConstraint"]

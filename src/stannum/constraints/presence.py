"""Presence and absence constraints."""

from __future__ import annotations

from collections.abc import Sized

from stannum.constraints.base import Constraint

ABSENT_TYPE = "stannum.constraints.absent"
PRESENT_TYPE = "stannum.constraints.present"


def is_blank(actual: object) -> bool:
    """True for None and for sized values with no items."""

    if actual is None:
        return True
    return isinstance(actual, Sized) and len(actual) == 0


class PresenceConstraint(Constraint):
    """Matches any object that is not None and not empty."""

    TYPE = ABSENT_TYPE
    NEGATED_TYPE = PRESENT_TYPE

    def matches(self, actual: object) -> bool:
        return not is_blank(actual)


class AbsenceConstraint(Constraint):
    """Matches None and empty objects."""

    TYPE = PRESENT_TYPE
    NEGATED_TYPE = ABSENT_TYPE

    def matches(self, actual: object) -> bool:
        return is_blank(actual)


__all__ = [
    "ABSENT_TYPE",
    "PRESENT_TYPE",
    "AbsenceConstraint",
    "PresenceConstraint",
    "is_blank",
]

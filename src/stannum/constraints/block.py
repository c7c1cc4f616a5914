"""Constraint built from a predicate function."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from stannum.constraints.base import Constraint

Predicate = Callable[[Any], bool]


class BlockConstraint(Constraint):
    """Delegates ``matches`` to a predicate; matches nothing without one.

    >>> constraint = BlockConstraint(lambda value: value == "expected")
    >>> constraint.matches("expected")
    True
    """

    def __init__(self, predicate: Predicate | None = None, **options: Any) -> None:
        super().__init__(**options)
        self._predicate = predicate

    def __eq__(self, other: object) -> bool:
        result = super().__eq__(other)
        if result is not True:
            return result
        return isinstance(other, BlockConstraint) and other._predicate is self._predicate

    __hash__ = None  # type: ignore[assignment]

    @property
    def predicate(self) -> Predicate | None:
        return self._predicate

    def matches(self, actual: object) -> bool:
        if self._predicate is None:
            return False
        return bool(self._predicate(actual))


__all__ = ["BlockConstraint", "Predicate"]

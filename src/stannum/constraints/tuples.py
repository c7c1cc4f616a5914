"""Constraint rejecting sequences longer than an expected item count."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from stannum.constraints.base import Constraint
from stannum.constraints.type import IS_NOT_TYPE
from stannum.errors import Errors
from stannum.exceptions import InvalidArgumentError

ExpectedCount = int | Callable[[], int]


def is_sequence(actual: object) -> bool:
    """True for ordered sequences other than text and byte strings."""

    return isinstance(actual, Sequence) and not isinstance(actual, (str, bytes, bytearray))


class ExtraItemsConstraint(Constraint):
    """Matches sequences with at most ``expected_count`` items.

    Each surplus item is reported at its own index with ``{"value": item}``.
    """

    TYPE = "stannum.constraints.tuples.extra_items"
    NEGATED_TYPE = "stannum.constraints.tuples.no_extra_items"
    CONFIGURATION_OPTIONS = frozenset({"expected_count"})

    def __init__(self, expected_count: ExpectedCount, **options: Any) -> None:
        if not callable(expected_count):
            _validate_expected_count(expected_count)
        super().__init__(expected_count=expected_count, **options)

    @property
    def expected_count(self) -> int:
        count = self._options["expected_count"]
        return count() if callable(count) else count

    def does_not_match(self, actual: object) -> bool:
        if not is_sequence(actual):
            return False
        return len(actual) > self.expected_count  # type: ignore[arg-type]

    def matches(self, actual: object) -> bool:
        if not is_sequence(actual):
            return False
        return len(actual) <= self.expected_count  # type: ignore[arg-type]

    def update_errors_for(self, actual: object, errors: Errors) -> Errors:
        if not is_sequence(actual):
            return _add_invalid_sequence_error(errors)
        expected_count = self.expected_count
        properties = self.error_properties()
        for index, item in enumerate(actual[expected_count:], start=expected_count):  # type: ignore[index]
            errors[index].add(self.type, message=self.message, **{**properties, "value": item})
        return errors

    def update_negated_errors_for(self, actual: object, errors: Errors) -> Errors:
        if not is_sequence(actual):
            return _add_invalid_sequence_error(errors)
        return super().update_negated_errors_for(actual, errors)


def _add_invalid_sequence_error(errors: Errors) -> Errors:
    return errors.add(IS_NOT_TYPE, type=Sequence, required=True)


def _validate_expected_count(expected_count: object) -> None:
    if isinstance(expected_count, bool) or not isinstance(expected_count, int):
        raise InvalidArgumentError("expected count must be an int or a callable")
    if expected_count < 0:
        raise InvalidArgumentError("expected count must not be negative")


__all__ = ["ExpectedCount", "ExtraItemsConstraint", "is_sequence"]

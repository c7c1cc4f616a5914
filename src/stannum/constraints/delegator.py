"""Constraint that forwards every check to a replaceable receiver."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from stannum.constraints.base import Constraint
from stannum.errors import Errors
from stannum.exceptions import InvalidArgumentError


class DelegatorConstraint(Constraint):
    """Forwards matching and error reporting to ``receiver``.

    Contracts register a delegator where the effective constraint may be
    swapped after the definition is added (variadic argument slots).
    """

    def __init__(self, receiver: Constraint) -> None:
        super().__init__()
        self.receiver = receiver

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Constraint):
            return NotImplemented
        return isinstance(other, DelegatorConstraint) and other.receiver == self.receiver

    __hash__ = None  # type: ignore[assignment]

    @property
    def negated_type(self) -> str:
        return self._receiver.negated_type

    @property
    def options(self) -> Mapping[str, Any]:
        return self._receiver.options

    @property
    def receiver(self) -> Constraint:
        return self._receiver

    @receiver.setter
    def receiver(self, value: Constraint) -> None:
        if not isinstance(value, Constraint):
            raise InvalidArgumentError("receiver must be a Constraint")
        self._receiver = value

    @property
    def type(self) -> str:
        return self._receiver.type

    def does_not_match(self, actual: object) -> bool:
        return self._receiver.does_not_match(actual)

    def errors_for(self, actual: object) -> Errors:
        return self._receiver.errors_for(actual)

    def match(self, actual: object) -> tuple[bool, Errors | None]:
        return self._receiver.match(actual)

    def matches(self, actual: object) -> bool:
        return self._receiver.matches(actual)

    def negated_errors_for(self, actual: object) -> Errors:
        return self._receiver.negated_errors_for(actual)

    def negated_match(self, actual: object) -> tuple[bool, Errors | None]:
        return self._receiver.negated_match(actual)

    def update_errors_for(self, actual: object, errors: Errors) -> Errors:
        return self._receiver.update_errors_for(actual, errors)

    def update_negated_errors_for(self, actual: object, errors: Errors) -> Errors:
        return self._receiver.update_negated_errors_for(actual, errors)


__all__ = ["DelegatorConstraint"]

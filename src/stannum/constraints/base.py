"""
stannum — constraint interface.

Purpose
- Define the atomic unit of validation: a predicate over a value that reports
  structured errors on failure (and, when negated, on success).

Behavior
- ``matches`` returns False unless a subclass says otherwise.
- ``errors_for``/``negated_errors_for`` build a fresh ``Errors`` tree; the
  ``update_*`` variants append to an existing node supplied by a contract.
- Constraints are immutable after construction; ``with_options`` returns a copy.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, ClassVar, Self

from stannum.errors import Errors
from stannum.exceptions import InvalidArgumentError

INVALID_TYPE = "stannum.constraints.invalid"
VALID_TYPE = "stannum.constraints.valid"

_TYPE_OPTIONS = ("type", "negated_type")
_MESSAGE_OPTIONS = ("message", "negated_message")


class Constraint:
    """A constraint codifies a particular expectation about an object.

    Options are arbitrary metadata. The reserved keys ``type``,
    ``negated_type``, ``message`` and ``negated_message`` override the error
    vocabulary; keys listed in ``CONFIGURATION_OPTIONS`` describe the
    constraint itself. Every other option is echoed into the data of each
    error record the constraint emits.
    """

    TYPE: ClassVar[str] = INVALID_TYPE
    NEGATED_TYPE: ClassVar[str] = VALID_TYPE
    RESERVED_OPTIONS: ClassVar[frozenset[str]] = frozenset((*_TYPE_OPTIONS, *_MESSAGE_OPTIONS))
    CONFIGURATION_OPTIONS: ClassVar[frozenset[str]] = frozenset()

    def __init__(self, **options: Any) -> None:
        _validate_options(options)
        self._options: dict[str, Any] = dict(options)

    def __copy__(self) -> Self:
        cls = type(self)
        duplicate = cls.__new__(cls)
        duplicate.__dict__.update(self.__dict__)
        duplicate._copy_properties(self)
        return duplicate

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Constraint):
            return NotImplemented
        return type(other) is type(self) and other._options == self._options

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(options={self._options!r})"

    @property
    def message(self) -> str | None:
        """Default error message generated for a non-matching object."""
        return self._options.get("message")

    @property
    def negated_message(self) -> str | None:
        """Default error message generated for a matching object."""
        return self._options.get("negated_message")

    @property
    def negated_type(self) -> str:
        """Error type generated for a matching object."""
        return self._options.get("negated_type", type(self).NEGATED_TYPE)

    @property
    def options(self) -> Mapping[str, Any]:
        return MappingProxyType(self._options)

    @property
    def type(self) -> str:
        """Error type generated for a non-matching object."""
        return self._options.get("type", type(self).TYPE)

    def copy(self) -> Self:
        return copy.copy(self)

    def does_not_match(self, actual: object) -> bool:
        return not self.matches(actual)

    def error_properties(self) -> dict[str, Any]:
        """Data copied into every error record emitted by this constraint."""

        excluded = self.RESERVED_OPTIONS | self.CONFIGURATION_OPTIONS
        return {key: value for key, value in self._options.items() if key not in excluded}

    def errors_for(self, actual: object) -> Errors:
        """Generate errors for an object that does not match the constraint.

        Generating errors for a matching object is undefined behavior.
        """

        return self.update_errors_for(actual, Errors())

    def match(self, actual: object) -> tuple[bool, Errors | None]:
        if self.matches(actual):
            return True, None
        return False, self.errors_for(actual)

    def matches(self, actual: object) -> bool:
        return False

    def negated_errors_for(self, actual: object) -> Errors:
        return self.update_negated_errors_for(actual, Errors())

    def negated_match(self, actual: object) -> tuple[bool, Errors | None]:
        if self.does_not_match(actual):
            return True, None
        return False, self.negated_errors_for(actual)

    def update_errors_for(self, actual: object, errors: Errors) -> Errors:
        return errors.add(self.type, message=self.message, **self.error_properties())

    def update_negated_errors_for(self, actual: object, errors: Errors) -> Errors:
        return errors.add(
            self.negated_type, message=self.negated_message, **self.error_properties()
        )

    def with_options(self, **options: Any) -> Self:
        """Return a copy of the constraint with ``options`` merged in."""

        _validate_options(options)
        duplicate = copy.copy(self)
        duplicate._options = {**self._options, **options}
        return duplicate

    def _copy_properties(self, source: Constraint) -> None:
        self._options = dict(source._options)


def _validate_options(options: Mapping[str, Any]) -> None:
    for key in _TYPE_OPTIONS:
        if key not in options:
            continue
        value = options[key]
        if not isinstance(value, str) or not value:
            raise InvalidArgumentError(f"{key} must be a non-empty string")
    for key in _MESSAGE_OPTIONS:
        value = options.get(key)
        if value is None:
            continue
        if not isinstance(value, str) or not value:
            raise InvalidArgumentError(f"{key} must be a non-empty string")


__all__ = [
    "INVALID_TYPE",
    "VALID_TYPE",
    "Constraint",
]

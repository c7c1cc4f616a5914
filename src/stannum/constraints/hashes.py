"""Constraint rejecting mapping keys outside an expected set."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from stannum.constraints.base import Constraint
from stannum.constraints.type import IS_NOT_TYPE
from stannum.errors import Errors
from stannum.exceptions import InvalidArgumentError

ExpectedKeys = Iterable[str | int] | Callable[[], Iterable[str | int]]


class ExtraKeysConstraint(Constraint):
    """Matches mappings whose keys are a subset of ``expected_keys``.

    ``expected_keys`` may be a callable, in which case it is re-evaluated on
    every check; contracts use this so keys declared after construction are
    still expected. A failure adds one root record listing the unexpected keys
    in insertion order as ``{"keys": [...]}``.
    """

    TYPE = "stannum.constraints.hashes.extra_keys"
    NEGATED_TYPE = "stannum.constraints.hashes.no_extra_keys"

    def __init__(self, expected_keys: ExpectedKeys, **options: Any) -> None:
        _validate_expected_keys(expected_keys() if callable(expected_keys) else expected_keys)
        super().__init__(**options)
        self._expected_keys: ExpectedKeys = (
            expected_keys if callable(expected_keys) else frozenset(expected_keys)
        )

    def __eq__(self, other: object) -> bool:
        result = super().__eq__(other)
        if result is not True:
            return result
        return isinstance(other, ExtraKeysConstraint) and other.expected_keys == self.expected_keys

    __hash__ = None  # type: ignore[assignment]

    @property
    def expected_keys(self) -> frozenset[str | int]:
        if callable(self._expected_keys):
            return frozenset(self._expected_keys())
        return frozenset(self._expected_keys)

    @property
    def key_source(self) -> ExpectedKeys:
        """The callable or fixed collection the expected keys are read from."""
        return self._expected_keys

    def does_not_match(self, actual: object) -> bool:
        if not isinstance(actual, Mapping):
            return False
        return bool(self.extra_keys(actual))

    def extra_keys(self, actual: Mapping[Any, Any]) -> list[Any]:
        expected = self.expected_keys
        return [key for key in actual if key not in expected]

    def matches(self, actual: object) -> bool:
        if not isinstance(actual, Mapping):
            return False
        return not self.extra_keys(actual)

    def update_errors_for(self, actual: object, errors: Errors) -> Errors:
        if not isinstance(actual, Mapping):
            return _add_invalid_mapping_error(errors)
        return errors.add(
            self.type,
            message=self.message,
            **{**self.error_properties(), "keys": self.extra_keys(actual)},
        )

    def update_negated_errors_for(self, actual: object, errors: Errors) -> Errors:
        if not isinstance(actual, Mapping):
            return _add_invalid_mapping_error(errors)
        return super().update_negated_errors_for(actual, errors)


def _add_invalid_mapping_error(errors: Errors) -> Errors:
    return errors.add(IS_NOT_TYPE, type=Mapping, required=True)


def _validate_expected_keys(expected_keys: object) -> None:
    if isinstance(expected_keys, (str, bytes)) or not isinstance(expected_keys, Iterable):
        raise InvalidArgumentError("expected keys must be a collection or a callable")
    for key in expected_keys:
        if isinstance(key, bool) or not isinstance(key, (str, int)):
            raise InvalidArgumentError(f"key must be a str or an int, got {key!r}")


__all__ = ["ExpectedKeys", "ExtraKeysConstraint"]

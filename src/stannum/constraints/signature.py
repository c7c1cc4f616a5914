"""Duck-typing constraint: the value must expose a set of attributes."""

from __future__ import annotations

from typing import Any

from stannum.constraints.base import Constraint
from stannum.errors import Errors
from stannum.exceptions import InvalidArgumentError


class SignatureConstraint(Constraint):
    """Matches objects that have every name in ``expected_methods``."""

    TYPE = "stannum.constraints.does_not_have_methods"
    NEGATED_TYPE = "stannum.constraints.has_methods"
    CONFIGURATION_OPTIONS = frozenset({"expected_methods"})

    def __init__(self, *expected_methods: str, **options: Any) -> None:
        if not expected_methods:
            raise InvalidArgumentError("expected methods must not be empty")
        if not all(isinstance(name, str) and name for name in expected_methods):
            raise InvalidArgumentError("expected method must be a non-empty string")
        super().__init__(expected_methods=tuple(expected_methods), **options)

    @property
    def expected_methods(self) -> tuple[str, ...]:
        return self._options["expected_methods"]

    def does_not_match(self, actual: object) -> bool:
        return len(self.missing_methods(actual)) == len(self.expected_methods)

    def matches(self, actual: object) -> bool:
        return not self.missing_methods(actual)

    def missing_methods(self, actual: object) -> list[str]:
        return [name for name in self.expected_methods if not hasattr(actual, name)]

    def update_errors_for(self, actual: object, errors: Errors) -> Errors:
        return errors.add(self.type, message=self.message, **self._method_data(actual))

    def update_negated_errors_for(self, actual: object, errors: Errors) -> Errors:
        return errors.add(
            self.negated_type, message=self.negated_message, **self._method_data(actual)
        )

    def _method_data(self, actual: object) -> dict[str, Any]:
        return {
            **self.error_properties(),
            "methods": list(self.expected_methods),
            "missing": self.missing_methods(actual),
        }


__all__ = ["SignatureConstraint"]

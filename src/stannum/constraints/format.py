"""String format constraints: substring or regular-expression checks."""

from __future__ import annotations

import re
from typing import Any

from stannum.constraints.base import Constraint
from stannum.constraints.type import TypeConstraint
from stannum.errors import Errors
from stannum.exceptions import InvalidArgumentError

UUID_FORMAT = re.compile(
    r"\A[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}\Z"
)


class FormatConstraint(Constraint):
    """Matches strings containing ``expected_format``.

    A plain string is a substring test; a compiled pattern is searched.
    Non-string values fail with the ``is_not_type`` error of ``TypeConstraint(str)``.
    """

    TYPE = "stannum.constraints.does_not_match_format"
    NEGATED_TYPE = "stannum.constraints.matches_format"
    CONFIGURATION_OPTIONS = frozenset({"expected_format"})

    def __init__(self, expected_format: str | re.Pattern[str], **options: Any) -> None:
        if not isinstance(expected_format, (str, re.Pattern)):
            raise InvalidArgumentError("expected format must be a string or a compiled pattern")
        super().__init__(expected_format=expected_format, **options)
        self._type_constraint = TypeConstraint(str)

    @property
    def expected_format(self) -> str | re.Pattern[str]:
        return self._options["expected_format"]

    def error_properties(self) -> dict[str, Any]:
        expected = self.expected_format
        pattern = expected.pattern if isinstance(expected, re.Pattern) else expected
        return {**super().error_properties(), "format": pattern}

    def matches(self, actual: object) -> bool:
        if not isinstance(actual, str):
            return False
        expected = self.expected_format
        if isinstance(expected, str):
            return expected in actual
        return expected.search(actual) is not None

    def update_errors_for(self, actual: object, errors: Errors) -> Errors:
        if not self._type_constraint.matches(actual):
            return self._type_constraint.update_errors_for(actual, errors)
        return super().update_errors_for(actual, errors)


class UuidConstraint(FormatConstraint):
    TYPE = "stannum.constraints.is_not_a_uuid"
    NEGATED_TYPE = "stannum.constraints.is_a_uuid"

    def __init__(self, **options: Any) -> None:
        super().__init__(UUID_FORMAT, **options)

    def error_properties(self) -> dict[str, Any]:
        properties = super().error_properties()
        properties.pop("format", None)
        return properties


__all__ = ["UUID_FORMAT", "FormatConstraint", "UuidConstraint"]

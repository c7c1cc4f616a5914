"""Type constraint: ``isinstance`` checks with optional ``None`` handling."""

from __future__ import annotations

from typing import Any

from stannum.constraints.base import Constraint
from stannum.errors import Errors
from stannum.exceptions import InvalidArgumentError
from stannum.support.optional import resolve_required

IS_NOT_TYPE = "stannum.constraints.is_not_type"
IS_TYPE = "stannum.constraints.is_type"


class TypeConstraint(Constraint):
    """Matches instances of ``expected_type``.

    A non-required constraint also matches ``None``. Error records carry
    ``{"type": expected_type, "required": bool}`` in their data.

    >>> TypeConstraint(str).matches(None)
    False
    >>> TypeConstraint(str, required=False).matches(None)
    True
    """

    TYPE = IS_NOT_TYPE
    NEGATED_TYPE = IS_TYPE
    CONFIGURATION_OPTIONS = frozenset({"expected_type", "required"})

    def __init__(
        self,
        expected_type: type,
        *,
        required: bool | None = None,
        optional: bool | None = None,
        **options: Any,
    ) -> None:
        if not isinstance(expected_type, type):
            raise InvalidArgumentError("expected type must be a class")
        super().__init__(
            expected_type=expected_type,
            required=resolve_required(required=required, optional=optional),
            **options,
        )

    @property
    def expected_type(self) -> type:
        return self._options["expected_type"]

    @property
    def optional(self) -> bool:
        return not self.required

    @property
    def required(self) -> bool:
        return bool(self._options["required"])

    def error_properties(self) -> dict[str, Any]:
        return {
            **super().error_properties(),
            "required": self.required,
            "type": self.expected_type,
        }

    def matches(self, actual: object) -> bool:
        return self.matches_type(actual)

    def matches_type(self, actual: object) -> bool:
        if actual is None and self.optional:
            return True
        return isinstance(actual, self.expected_type)

    def with_options(self, **options: Any) -> TypeConstraint:
        if "required" in options or "optional" in options:
            options["required"] = resolve_required(
                required=options.pop("required", None),
                optional=options.pop("optional", None),
            )
        return super().with_options(**options)


class _CollectionType(TypeConstraint):
    """Shared emptiness handling for the typed collection constraints."""

    CONFIGURATION_OPTIONS = TypeConstraint.CONFIGURATION_OPTIONS | {"allow_empty"}

    def __init__(self, expected_type: type, *, allow_empty: bool = True, **options: Any) -> None:
        super().__init__(expected_type, allow_empty=bool(allow_empty), **options)

    @property
    def allow_empty(self) -> bool:
        return bool(self._options["allow_empty"])

    def does_not_match(self, actual: object) -> bool:
        return not self.matches_type(actual)

    def presence_matches(self, actual: Any) -> bool:
        return self.allow_empty or actual is None or len(actual) > 0

    def _add_presence_error(self, errors: Errors) -> Errors:
        from stannum.constraints.presence import ABSENT_TYPE

        return errors.add(ABSENT_TYPE, message=self.message, **self.error_properties())


__all__ = ["IS_NOT_TYPE", "IS_TYPE", "TypeConstraint"]

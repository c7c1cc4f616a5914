"""Contract whose definitions are scoped to properties of the candidate."""

from __future__ import annotations

from functools import reduce
from typing import Any

from stannum.constants import PropertyType
from stannum.contracts.base import BaseContract
from stannum.errors import Errors


class PropertyContract(BaseContract):
    """Maps each definition to an attribute, key or index of the candidate.

    Without a ``property_type`` the property is read as an attribute; with
    ``PropertyType.KEY`` or ``PropertyType.INDEX`` it is read by subscription.
    A sequence of properties is followed segment by segment. Missing values
    and values that do not support the access resolve to ``None``.
    """

    def map_errors(self, errors: Errors, *, property: Any = None, **options: Any) -> Errors:
        if property is None:
            return errors
        return errors.dig(_as_path(property))

    def map_value(
        self,
        actual: object,
        *,
        property: Any = None,
        property_type: PropertyType | None = None,
        **options: Any,
    ) -> Any:
        if property is None:
            return actual
        return reduce(
            lambda current, segment: self._access_property(current, segment, property_type),
            _as_path(property),
            actual,
        )

    def _access_property(
        self, actual: Any, segment: Any, property_type: PropertyType | None
    ) -> Any:
        if actual is None:
            return None
        if property_type is None:
            if not isinstance(segment, str):
                return None
            return getattr(actual, segment, None)
        try:
            return actual[segment]
        except (IndexError, KeyError, TypeError):
            return None


def _as_path(property: Any) -> tuple[Any, ...]:
    if isinstance(property, (list, tuple)):
        return tuple(property)
    return (property,)


__all__ = ["PropertyContract"]

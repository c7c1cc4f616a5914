"""
stannum — built-in type constraints.

Purpose
- Provide ready-made ``TypeConstraint`` specializations for the shapes the
  contracts depend on: ``None``, callables, sequences, lists and mappings.

Behavior
- ``ArrayType`` and ``HashType`` additionally validate emptiness and, when
  configured, the type of each item, key or value. Item and value failures are
  reported at the offending index or key; invalid keys are reported at the
  root.
- ``does_not_match`` on the collection types only negates the outer type
  check, so ``[1]`` neither matches nor does-not-match ``ArrayType(item_type=str)``.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from stannum.constraints.base import Constraint
from stannum.constraints.type import TypeConstraint, _CollectionType
from stannum.errors import Errors
from stannum.support.coercion import type_constraint

INVALID_KEY_TYPE = "stannum.constraints.types.hash.invalid_key"
INVALID_VALUE_TYPE = "stannum.constraints.types.hash.invalid_value"
IS_NIL_TYPE = "stannum.constraints.types.is_nil"
IS_NOT_NIL_TYPE = "stannum.constraints.types.is_not_nil"

_STRING_TYPES = (str, bytes, bytearray)


class NilType(TypeConstraint):
    """Matches only ``None``."""

    TYPE = IS_NOT_NIL_TYPE
    NEGATED_TYPE = IS_NIL_TYPE

    def __init__(self, **options: Any) -> None:
        super().__init__(type(None), **options)


class CallableType(TypeConstraint):
    def __init__(self, **options: Any) -> None:
        super().__init__(Callable, **options)  # type: ignore[arg-type]


class SequenceType(TypeConstraint):
    """Matches ordered sequences other than strings and byte strings."""

    def __init__(self, **options: Any) -> None:
        super().__init__(Sequence, **options)  # type: ignore[type-abstract]

    def matches_type(self, actual: object) -> bool:
        if isinstance(actual, _STRING_TYPES):
            return False
        return super().matches_type(actual)


class ArrayType(_CollectionType):
    """Matches lists, optionally non-empty and with a typed item constraint."""

    CONFIGURATION_OPTIONS = _CollectionType.CONFIGURATION_OPTIONS | {"item_type"}

    def __init__(
        self,
        *,
        item_type: type | Constraint | None = None,
        allow_empty: bool = True,
        **options: Any,
    ) -> None:
        super().__init__(
            list,
            allow_empty=allow_empty,
            item_type=type_constraint(item_type, allow_none=True, label="item type"),
            **options,
        )

    @property
    def item_type(self) -> Constraint | None:
        return self._options["item_type"]

    def item_type_matches(self, actual: Any) -> bool:
        if self.item_type is None or actual is None:
            return True
        return all(self.item_type.matches(item) for item in actual)

    def matches(self, actual: object) -> bool:
        return (
            self.matches_type(actual)
            and self.presence_matches(actual)
            and self.item_type_matches(actual)
        )

    def update_errors_for(self, actual: object, errors: Errors) -> Errors:
        if not isinstance(actual, list):
            return super().update_errors_for(actual, errors)
        if not self.presence_matches(actual):
            return self._add_presence_error(errors)
        item_type = self.item_type
        if item_type is not None:
            for index, item in enumerate(actual):
                if not item_type.matches(item):
                    item_type.update_errors_for(item, errors[index])
        return errors


class HashType(_CollectionType):
    """Matches mappings, optionally validating every key and value."""

    CONFIGURATION_OPTIONS = _CollectionType.CONFIGURATION_OPTIONS | {"key_type", "value_type"}

    def __init__(
        self,
        *,
        key_type: type | Constraint | None = None,
        value_type: type | Constraint | None = None,
        allow_empty: bool = True,
        **options: Any,
    ) -> None:
        super().__init__(
            Mapping,  # type: ignore[type-abstract]
            allow_empty=allow_empty,
            key_type=type_constraint(key_type, allow_none=True, label="key type"),
            value_type=type_constraint(value_type, allow_none=True, label="value type"),
            **options,
        )

    @property
    def key_type(self) -> Constraint | None:
        return self._options["key_type"]

    @property
    def value_type(self) -> Constraint | None:
        return self._options["value_type"]

    def key_type_matches(self, actual: Any) -> bool:
        if self.key_type is None or actual is None:
            return True
        return all(self.key_type.matches(key) for key in actual)

    def matches(self, actual: object) -> bool:
        return (
            self.matches_type(actual)
            and self.presence_matches(actual)
            and self.key_type_matches(actual)
            and self.value_type_matches(actual)
        )

    def update_errors_for(self, actual: object, errors: Errors) -> Errors:
        if not isinstance(actual, Mapping):
            return super().update_errors_for(actual, errors)
        if not self.presence_matches(actual):
            return self._add_presence_error(errors)
        key_type = self.key_type
        if key_type is not None and not self.key_type_matches(actual):
            invalid = [key for key in actual if not key_type.matches(key)]
            errors.add(INVALID_KEY_TYPE, keys=invalid)
        value_type = self.value_type
        if value_type is not None and not self.value_type_matches(actual):
            self._add_invalid_value_errors(actual, value_type, errors)
        return errors

    def value_type_matches(self, actual: Any) -> bool:
        if self.value_type is None or actual is None:
            return True
        return all(self.value_type.matches(value) for value in actual.values())

    def _add_invalid_value_errors(
        self, actual: Mapping[Any, Any], value_type: Constraint, errors: Errors
    ) -> None:
        for key, value in actual.items():
            if value_type.matches(value):
                continue
            if _is_error_key(key):
                errors[key].add(INVALID_VALUE_TYPE, value=value)
            else:
                errors.add(INVALID_VALUE_TYPE, key=key, value=value)


def _is_error_key(key: object) -> bool:
    return isinstance(key, (str, int)) and not isinstance(key, bool) and key != ""


__all__ = [
    "INVALID_KEY_TYPE",
    "INVALID_VALUE_TYPE",
    "IS_NIL_TYPE",
    "IS_NOT_NIL_TYPE",
    "ArrayType",
    "CallableType",
    "HashType",
    "NilType",
    "SequenceType",
]

"""Contract for mapping-like values addressed by key."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Self

from stannum.constants import PropertyType
from stannum.constraints.base import Constraint
from stannum.constraints.delegator import DelegatorConstraint
from stannum.constraints.hashes import ExtraKeysConstraint
from stannum.constraints.type import TypeConstraint
from stannum.contracts.base import BaseContract
from stannum.contracts.property_contract import PropertyContract
from stannum.exceptions import InvalidArgumentError


class MapContract(PropertyContract):
    """Contract that validates a mapping key by key.

    Registers a sanity check that the candidate is a mapping and, unless
    ``allow_extra_keys`` is set, a trailing check that the candidate has no
    keys other than the declared ones.
    """

    CONFIGURATION_OPTIONS = frozenset({"allow_extra_keys"})

    def __init__(self, *, allow_extra_keys: bool = False, **options: Any) -> None:
        super().__init__(allow_extra_keys=bool(allow_extra_keys), **options)

    @property
    def allow_extra_keys(self) -> bool:
        return bool(self._options.get("allow_extra_keys"))

    def add_key_constraint(
        self,
        key: Any,
        constraint: Constraint,
        *,
        sanity: bool = False,
        **options: Any,
    ) -> Self:
        return self.add_constraint(
            constraint,
            property=key,
            property_type=PropertyType.KEY,
            sanity=sanity,
            **options,
        )

    def expected_keys(self) -> list[str | int]:
        """Declared top-level keys, in declaration order and without duplicates."""

        keys: list[str | int] = []
        for definition in self.each_constraint():
            if definition.property_type is not PropertyType.KEY:
                continue
            key = definition.property
            if isinstance(key, tuple):
                key = key[0]
            if key not in keys:
                keys.append(key)
        return keys

    def with_options(self, **options: Any) -> Self:
        if "allow_extra_keys" in options:
            raise InvalidArgumentError("cannot change option 'allow_extra_keys'")
        return super().with_options(**options)

    def _add_extra_keys_constraint(self) -> None:
        self._add_trailing_constraint(ExtraKeysConstraint(self.expected_keys))

    def _add_type_constraint(self) -> None:
        self.add_constraint(TypeConstraint(Mapping), sanity=True)

    def _define_constraints(self) -> None:
        self._add_type_constraint()
        if not self.allow_extra_keys:
            self._add_extra_keys_constraint()

    def _rebind_constraint(self, constraint: Constraint, source: BaseContract) -> Constraint:
        if isinstance(constraint, DelegatorConstraint):
            return DelegatorConstraint(self._rebind_constraint(constraint.receiver, source))
        if (
            isinstance(constraint, ExtraKeysConstraint)
            and isinstance(source, MapContract)
            and constraint.key_source == source.expected_keys
        ):
            return type(constraint)(self.expected_keys, **constraint.options)
        return super()._rebind_constraint(constraint, source)


__all__ = ["MapContract"]

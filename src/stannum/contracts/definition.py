"""Binding of a constraint into a contract with its scoping options."""

from __future__ import annotations

import weakref
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from stannum.constants import PropertyType

if TYPE_CHECKING:
    from stannum.constraints.base import Constraint
    from stannum.contracts.base import BaseContract

PropertyPath = str | int | tuple[str | int, ...] | list[str | int]


class Definition:
    """Immutable ``(constraint, contract, options)`` triple.

    The contract is held through a weak reference: the owning contract keeps
    its definitions alive, never the reverse. Recognized options are
    ``property``, ``property_name``, ``property_type`` and ``sanity``; any
    other option is carried along for the owning contract's mapping hooks.
    """

    __slots__ = ("_constraint", "_contract_ref", "_options")

    def __init__(
        self,
        constraint: Constraint,
        contract: BaseContract,
        options: Mapping[str, Any] | None = None,
    ) -> None:
        self._constraint = constraint
        self._contract_ref = weakref.ref(contract)
        self._options: Mapping[str, Any] = MappingProxyType(dict(options or {}))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Definition):
            return NotImplemented
        return (
            other._constraint == self._constraint
            and other._contract_ref() is self._contract_ref()
            and dict(other._options) == dict(self._options)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Definition(constraint={self._constraint!r}, "
            f"options={dict(self._options)!r})"
        )

    @property
    def constraint(self) -> Constraint:
        return self._constraint

    @property
    def contract(self) -> BaseContract:
        contract = self._contract_ref()
        if contract is None:
            raise ReferenceError("the contract owning this definition no longer exists")
        return contract

    @property
    def options(self) -> Mapping[str, Any]:
        return self._options

    @property
    def property_name(self) -> PropertyPath | None:
        return self._options.get("property_name", self._options.get("property"))

    @property
    def property_type(self) -> PropertyType | None:
        value = self._options.get("property_type")
        return None if value is None else PropertyType(value)

    @property
    def sanity(self) -> bool:
        return bool(self._options.get("sanity", False))

    # Defined last: the name shadows the builtin decorator for the rest of the class body.
    @property
    def property(self) -> PropertyPath | None:
        return self._options.get("property")

    def replace(self, *, constraint: Constraint | None = None, **options: Any) -> Definition:
        """Return a new definition for the same contract with updated fields."""

        return Definition(
            self._constraint if constraint is None else constraint,
            self.contract,
            {**self._options, **options},
        )


__all__ = ["Definition", "PropertyPath"]

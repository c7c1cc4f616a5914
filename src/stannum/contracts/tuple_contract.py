"""Contract for ordered sequences addressed by index."""

from __future__ import annotations

from typing import Any, Self

from stannum.constants import PropertyType
from stannum.constraints.base import Constraint
from stannum.constraints.delegator import DelegatorConstraint
from stannum.constraints.tuples import ExtraItemsConstraint
from stannum.constraints.types import SequenceType
from stannum.contracts.base import BaseContract
from stannum.contracts.property_contract import PropertyContract
from stannum.exceptions import InvalidArgumentError


class TupleContract(PropertyContract):
    """Contract that validates a sequence item by item.

    Registers a sanity check that the candidate is a non-string sequence and,
    unless ``allow_extra_items`` is set, a trailing check that it has no more
    items than the highest declared index allows.
    """

    CONFIGURATION_OPTIONS = frozenset({"allow_extra_items"})

    def __init__(self, *, allow_extra_items: bool = False, **options: Any) -> None:
        super().__init__(allow_extra_items=bool(allow_extra_items), **options)

    @property
    def allow_extra_items(self) -> bool:
        return bool(self._options.get("allow_extra_items"))

    def add_index_constraint(
        self,
        index: int,
        constraint: Constraint,
        *,
        sanity: bool = False,
        **options: Any,
    ) -> Self:
        return self.add_constraint(
            constraint,
            property=index,
            property_type=PropertyType.INDEX,
            sanity=sanity,
            **options,
        )

    def expected_count(self) -> int:
        """One past the highest declared index."""

        count = 0
        for definition in self.each_constraint():
            if definition.property_type is not PropertyType.INDEX:
                continue
            index = definition.property
            if isinstance(index, int):
                count = max(count, index + 1)
        return count

    def with_options(self, **options: Any) -> Self:
        if "allow_extra_items" in options:
            raise InvalidArgumentError("cannot change option 'allow_extra_items'")
        return super().with_options(**options)

    def _add_extra_items_constraint(self) -> None:
        self._add_trailing_constraint(ExtraItemsConstraint(self.expected_count))

    def _add_type_constraint(self) -> None:
        self.add_constraint(SequenceType(), sanity=True)

    def _define_constraints(self) -> None:
        self._add_type_constraint()
        if not self.allow_extra_items:
            self._add_extra_items_constraint()

    def _is_valid_property(
        self, *, property: Any, property_type: PropertyType | None = None, **options: Any
    ) -> bool:
        if property_type is PropertyType.INDEX:
            return isinstance(property, int) and not isinstance(property, bool) and property >= 0
        return super()._is_valid_property(
            property=property, property_type=property_type, **options
        )

    def _rebind_constraint(self, constraint: Constraint, source: BaseContract) -> Constraint:
        if isinstance(constraint, DelegatorConstraint):
            return DelegatorConstraint(self._rebind_constraint(constraint.receiver, source))
        if (
            isinstance(constraint, ExtraItemsConstraint)
            and isinstance(source, TupleContract)
            and constraint.options.get("expected_count") == source.expected_count
        ):
            options = {
                key: value for key, value in constraint.options.items() if key != "expected_count"
            }
            return type(constraint)(self.expected_count, **options)
        return super()._rebind_constraint(constraint, source)


__all__ = ["TupleContract"]

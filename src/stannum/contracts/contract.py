"""General-purpose contract for validating objects by attribute."""

from __future__ import annotations

from typing import Any, Self

from stannum.constraints.base import Constraint
from stannum.contracts.property_contract import PropertyContract


class Contract(PropertyContract):
    """Contract for arbitrary objects.

    >>> from stannum.constraints import PresenceConstraint
    >>> contract = Contract().add_property_constraint("name", PresenceConstraint())
    >>> contract.matches(None)
    False
    """

    def add_property_constraint(
        self,
        property: Any,
        constraint: Constraint,
        *,
        sanity: bool = False,
        **options: Any,
    ) -> Self:
        return self.add_constraint(constraint, property=property, sanity=sanity, **options)


__all__ = ["Contract"]

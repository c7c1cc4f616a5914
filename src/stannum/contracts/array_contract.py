"""Tuple contract restricted to ``list`` values with a shared item type."""

from __future__ import annotations

from typing import Any, Self

from stannum.constraints.base import Constraint
from stannum.constraints.types import ArrayType
from stannum.contracts.tuple_contract import TupleContract
from stannum.exceptions import InvalidArgumentError


class ArrayContract(TupleContract):
    CONFIGURATION_OPTIONS = TupleContract.CONFIGURATION_OPTIONS | {"item_type"}

    def __init__(
        self,
        *,
        allow_extra_items: bool = False,
        item_type: type | Constraint | None = None,
        **options: Any,
    ) -> None:
        super().__init__(allow_extra_items=allow_extra_items, item_type=item_type, **options)

    @property
    def item_type(self) -> type | Constraint | None:
        return self._options.get("item_type")

    def with_options(self, **options: Any) -> Self:
        if "item_type" in options:
            raise InvalidArgumentError("cannot change option 'item_type'")
        return super().with_options(**options)

    def _add_type_constraint(self) -> None:
        self.add_constraint(ArrayType(item_type=self.item_type), sanity=True)


__all__ = ["ArrayContract"]

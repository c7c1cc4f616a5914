"""Contract for ``dict`` values with optional key and value types."""

from __future__ import annotations

from typing import Any

from stannum.constraints.base import Constraint
from stannum.constraints.types import HashType
from stannum.contracts.map_contract import MapContract


class HashContract(MapContract):
    """Validates a mapping key by key.

    The sanity check is a ``HashType`` built from ``key_type`` and
    ``value_type``, so every key and value is type-checked before any key
    constraint runs.

    >>> from stannum.constraints import PresenceConstraint
    >>> contract = HashContract().add_key_constraint("name", PresenceConstraint())
    >>> contract.matches({"name": "Alan", "role": "admin"})
    False
    """

    CONFIGURATION_OPTIONS = MapContract.CONFIGURATION_OPTIONS | {"key_type", "value_type"}

    def __init__(
        self,
        *,
        allow_extra_keys: bool = False,
        key_type: type | Constraint | None = None,
        value_type: type | Constraint | None = None,
        **options: Any,
    ) -> None:
        super().__init__(
            allow_extra_keys=allow_extra_keys,
            key_type=key_type,
            value_type=value_type,
            **options,
        )

    @property
    def key_type(self) -> type | Constraint | None:
        return self._options.get("key_type")

    @property
    def value_type(self) -> type | Constraint | None:
        return self._options.get("value_type")

    def _add_type_constraint(self) -> None:
        self.add_constraint(
            HashType(key_type=self.key_type, value_type=self.value_type), sanity=True
        )


__all__ = ["HashContract"]

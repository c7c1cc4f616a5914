"""Shape check for a parameters mapping: arguments, keywords and block."""

from __future__ import annotations

from typing import Any

from stannum.constraints.types import CallableType, HashType, SequenceType
from stannum.contracts.hash_contract import HashContract


class SignatureContract(HashContract):
    """Matches ``{"arguments": [...], "keywords": {...}, "block": callable | None}``."""

    def __init__(self, **options: Any) -> None:
        super().__init__(key_type=str, **options)

    def _define_constraints(self) -> None:
        super()._define_constraints()
        self.add_key_constraint("arguments", SequenceType())
        self.add_key_constraint("keywords", HashType(key_type=str))
        self.add_key_constraint("block", CallableType(optional=True))


__all__ = ["SignatureContract"]

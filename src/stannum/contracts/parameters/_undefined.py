"""Marker for an argument or keyword the caller did not pass."""

from __future__ import annotations

from typing import Final


class _Undefined:
    __slots__ = ()

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED: Final = _Undefined()

__all__ = ["UNDEFINED"]

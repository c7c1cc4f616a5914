"""Message rendering for error records."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Protocol

from stannum.messages.default_strategy import DefaultStrategy


class MessageStrategy(Protocol):
    """Anything callable as ``strategy(error_type, **data) -> str``."""

    def __call__(self, error_type: str, /, **data: Any) -> str: ...


@lru_cache(maxsize=1)
def default_strategy() -> DefaultStrategy:
    """Shared English strategy over the bundled catalog."""

    return DefaultStrategy()


__all__ = ["DefaultStrategy", "MessageStrategy", "default_strategy"]

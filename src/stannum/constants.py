"""Stable constants shared across constraints, contracts and configuration."""

from __future__ import annotations

from enum import StrEnum
from typing import Final

# Schema versions for persisted configuration.
CONFIG_SCHEMA_VERSION: Final[int] = 1

# Default locale for the bundled message catalog.
DEFAULT_LOCALE: Final[str] = "en"


class PropertyType(StrEnum):
    """How a definition's ``property`` is read from the candidate value."""

    KEY = "key"
    INDEX = "index"


__all__ = [
    "CONFIG_SCHEMA_VERSION",
    "DEFAULT_LOCALE",
    "PropertyType",
]

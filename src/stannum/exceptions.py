"""Exception types raised for programming and configuration errors.

Validation failures are never raised; they are reported as ``Errors`` data.
"""

from __future__ import annotations


class StannumError(Exception):
    """Base class for errors raised by stannum."""


class InvalidArgumentError(StannumError, ValueError):
    """Raised when a constructor or builder receives a malformed argument."""


class ContractDefinitionError(StannumError, RuntimeError):
    """Raised when a contract definition conflicts with an existing one."""


class MessageCatalogError(StannumError, ValueError):
    """Raised when a message catalog cannot be read or parsed."""


__all__ = [
    "ContractDefinitionError",
    "InvalidArgumentError",
    "MessageCatalogError",
    "StannumError",
]

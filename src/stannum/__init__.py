"""
stannum — structured data validation.

Purpose
- Package root. Exports the error tree, the constraint and contract base
  classes, and the exception hierarchy.

Import boundary rules
- Must not have side effects at import time (no config loading, no logging init).
- Concrete constraints and contracts live in ``stannum.constraints`` and
  ``stannum.contracts``; config and logging setup are opt-in via
  ``stannum.config`` and ``stannum.observability``.
"""

from stannum.constants import PropertyType
from stannum.constraints.base import Constraint
from stannum.contracts.base import BaseContract
from stannum.contracts.contract import Contract
from stannum.errors import ErrorRecord, Errors
from stannum.exceptions import (
    ContractDefinitionError,
    InvalidArgumentError,
    MessageCatalogError,
    StannumError,
)

__version__ = "0.1.0"

__all__ = [
    "BaseContract",
    "Constraint",
    "Contract",
    "ContractDefinitionError",
    "ErrorRecord",
    "Errors",
    "InvalidArgumentError",
    "MessageCatalogError",
    "PropertyType",
    "StannumError",
    "__version__",
]

"""Contract exports: the evaluation base and the specialized contracts."""

from stannum.contracts.array_contract import ArrayContract
from stannum.contracts.base import BaseContract
from stannum.contracts.contract import Contract
from stannum.contracts.definition import Definition, PropertyPath
from stannum.contracts.hash_contract import HashContract
from stannum.contracts.map_contract import MapContract
from stannum.contracts.parameters import (
    ArgumentsContract,
    KeywordsContract,
    ParametersContract,
    SignatureContract,
)
from stannum.contracts.property_contract import PropertyContract
from stannum.contracts.tuple_contract import TupleContract

__all__ = [
    "ArgumentsContract",
    "ArrayContract",
    "BaseContract",
    "Contract",
    "Definition",
    "HashContract",
    "KeywordsContract",
    "MapContract",
    "ParametersContract",
    "PropertyContract",
    "PropertyPath",
    "SignatureContract",
    "TupleContract",
]

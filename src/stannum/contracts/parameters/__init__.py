"""Contracts for validating call parameters."""

from stannum.contracts.parameters._undefined import UNDEFINED
from stannum.contracts.parameters.arguments_contract import ArgumentsContract
from stannum.contracts.parameters.keywords_contract import KeywordsContract
from stannum.contracts.parameters.parameters_contract import ParametersContract
from stannum.contracts.parameters.signature_contract import SignatureContract

__all__ = [
    "UNDEFINED",
    "ArgumentsContract",
    "KeywordsContract",
    "ParametersContract",
    "SignatureContract",
]

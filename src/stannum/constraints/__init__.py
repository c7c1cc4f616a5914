"""Constraint exports: the base interface and every built-in variant."""

from stannum.constraints.anything import AnythingConstraint, NothingConstraint
from stannum.constraints.base import INVALID_TYPE, VALID_TYPE, Constraint
from stannum.constraints.block import BlockConstraint
from stannum.constraints.boolean import BooleanConstraint
from stannum.constraints.delegator import DelegatorConstraint
from stannum.constraints.enum import EnumConstraint
from stannum.constraints.equality import EqualityConstraint, IdentityConstraint
from stannum.constraints.format import FormatConstraint, UuidConstraint
from stannum.constraints.hashes import ExtraKeysConstraint
from stannum.constraints.parameters import ExtraArgumentsConstraint, ExtraKeywordsConstraint
from stannum.constraints.presence import AbsenceConstraint, PresenceConstraint
from stannum.constraints.signature import SignatureConstraint
from stannum.constraints.tuples import ExtraItemsConstraint
from stannum.constraints.type import TypeConstraint
from stannum.constraints.types import ArrayType, CallableType, HashType, NilType, SequenceType
from stannum.constraints.union import UnionConstraint

__all__ = [
    "INVALID_TYPE",
    "VALID_TYPE",
    "AbsenceConstraint",
    "AnythingConstraint",
    "ArrayType",
    "BlockConstraint",
    "BooleanConstraint",
    "CallableType",
    "Constraint",
    "DelegatorConstraint",
    "EnumConstraint",
    "EqualityConstraint",
    "ExtraArgumentsConstraint",
    "ExtraItemsConstraint",
    "ExtraKeysConstraint",
    "ExtraKeywordsConstraint",
    "FormatConstraint",
    "HashType",
    "IdentityConstraint",
    "NilType",
    "NothingConstraint",
    "PresenceConstraint",
    "SequenceType",
    "SignatureConstraint",
    "TypeConstraint",
    "UnionConstraint",
    "UuidConstraint",
]

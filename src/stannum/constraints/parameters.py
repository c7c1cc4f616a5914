"""Extra-item and extra-key constraints specialized for call parameters."""

from __future__ import annotations

from stannum.constraints.hashes import ExtraKeysConstraint
from stannum.constraints.tuples import ExtraItemsConstraint


class ExtraArgumentsConstraint(ExtraItemsConstraint):
    TYPE = "stannum.constraints.parameters.extra_arguments"
    NEGATED_TYPE = "stannum.constraints.parameters.no_extra_arguments"


class ExtraKeywordsConstraint(ExtraKeysConstraint):
    TYPE = "stannum.constraints.parameters.extra_keywords"
    NEGATED_TYPE = "stannum.constraints.parameters.no_extra_keywords"


__all__ = ["ExtraArgumentsConstraint", "ExtraKeywordsConstraint"]

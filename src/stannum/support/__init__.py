"""Helpers shared by constraint and contract constructors."""

from stannum.support.coercion import presence_constraint, type_constraint
from stannum.support.optional import resolve_required

__all__ = ["presence_constraint", "resolve_required", "type_constraint"]

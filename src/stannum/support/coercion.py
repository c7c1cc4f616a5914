"""Coerce loosely specified constraint arguments into constraint instances.

Parameter contracts and the typed collection constraints accept a class, a
boolean or an existing constraint wherever a constraint is expected; these
helpers perform that normalization and reject anything else.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from stannum.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from stannum.constraints.base import Constraint

ConstraintFactory = Callable[..., "Constraint"]


def presence_constraint(
    present: object,
    *,
    allow_none: bool = False,
    label: str = "present",
    factory: ConstraintFactory | None = None,
    **options: Any,
) -> Constraint | None:
    """Build a presence or absence constraint from ``True``/``False``."""

    from stannum.constraints.base import Constraint
    from stannum.constraints.presence import AbsenceConstraint, PresenceConstraint

    if allow_none and present is None:
        return None
    if isinstance(present, Constraint):
        return present.with_options(**options) if options else present
    if isinstance(present, bool):
        if factory is not None:
            return factory(present, **options)
        if present:
            return PresenceConstraint(**options)
        return AbsenceConstraint(**options)
    raise InvalidArgumentError(f"{label} must be true or false or a constraint")


def type_constraint(
    value: object,
    *,
    allow_none: bool = False,
    label: str = "type",
    factory: ConstraintFactory | None = None,
    **options: Any,
) -> Constraint | None:
    """Build a ``TypeConstraint`` from a class, or copy an existing constraint."""

    from stannum.constraints.base import Constraint
    from stannum.constraints.type import TypeConstraint

    if allow_none and value is None:
        return None
    if isinstance(value, Constraint):
        return value.with_options(**options) if options else value
    if isinstance(value, type):
        if factory is not None:
            return factory(value, **options)
        return TypeConstraint(value, **options)
    raise InvalidArgumentError(f"{label} must be a class or a constraint")


__all__ = ["ConstraintFactory", "presence_constraint", "type_constraint"]

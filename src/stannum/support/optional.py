"""Resolution of the paired ``required=`` / ``optional=`` flags."""

from __future__ import annotations

from stannum.exceptions import InvalidArgumentError


def resolve_required(
    *,
    required: bool | None = None,
    optional: bool | None = None,
    required_by_default: bool = True,
) -> bool:
    """Return the effective ``required`` flag.

    Either flag may be given alone; when both are given they must agree
    (``required=True, optional=False``). With neither, the default wins.
    """

    default = _validate_flag(required_by_default, "required_by_default")
    required = _validate_flag(required, "required")
    optional = _validate_flag(optional, "optional")

    if required is None and optional is None:
        return bool(default)
    if required is None:
        return not optional
    if optional is None:
        return required
    if required == optional:
        raise InvalidArgumentError("required and optional must not have the same value")
    return required


def _validate_flag(value: object, name: str) -> bool | None:
    if value is None or isinstance(value, bool):
        return value
    raise InvalidArgumentError(f"{name} must be true or false")


__all__ = ["resolve_required"]

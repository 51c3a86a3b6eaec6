"""Coercion of "type or constraint" arguments into constraints."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from stannum.constraints.base import Constraint


def type_constraint(
    value: Any,
    *,
    allow_none: bool = False,
    as_: str = "type",
    builder: Callable[..., Constraint] | None = None,
    **options: Any,
) -> Constraint | None:
    """Coerce a class, tuple of classes, type name or constraint into a constraint.

    Constraints are returned as-is, or re-optioned when options are given.
    Classes and names become Type constraints (or whatever builder returns).
    """
    from stannum.constraints.base import Constraint
    from stannum.constraints.type import Type

    if allow_none and value is None: return None
    if isinstance(value, Constraint): return value.with_options(**options) if options else value
    if isinstance(value, (type, str)) or (isinstance(value, tuple) and value and all(isinstance(t, type) for t in value)):
        return builder(value, **options) if builder else Type(value, **options)
    raise TypeError(f"{as_} must be a class or a constraint")


def presence_constraint(
    present: Any,
    *,
    allow_none: bool = False,
    as_: str = "present",
    builder: Callable[..., Constraint] | None = None,
    **options: Any,
) -> Constraint | None:
    """Coerce True/False or a constraint into a presence-style constraint."""
    from stannum.constraints.base import Constraint
    from stannum.constraints.presence import Absence, Presence

    if allow_none and present is None: return None
    if isinstance(present, Constraint): return present.with_options(**options) if options else present
    if present is True or present is False:
        if builder: return builder(present, **options)
        return Presence(**options) if present else Absence(**options)
    raise TypeError(f"{as_} must be true or false or a constraint")

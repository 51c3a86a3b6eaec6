"""Custom constraints built from predicate functions.

    @constraint(type="app.constraints.is_odd", negated_type="app.constraints.is_even")
    def odd(value):
        return isinstance(value, int) and value % 2 == 1

    odd.matches(3)       # True
    odd.errors_for(4)    # [{"type": "app.constraints.is_odd", ...}]
"""
from __future__ import annotations

import functools
from typing import Any, Callable

from stannum.constraints.base import Constraint


class Custom(Constraint):
    """Constraint whose matches() is the wrapped predicate's truthiness.

    Exceptions raised by the predicate propagate to the caller.
    """

    def __init__(self, predicate: Callable[[Any], Any], **options: Any) -> None:
        if not callable(predicate):
            raise TypeError("predicate must be callable")
        self.predicate = predicate
        super().__init__(**options)
        functools.update_wrapper(self, predicate, updated=())

    def matches(self, actual: Any) -> bool:
        return bool(self.predicate(actual))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Constraint):
            return NotImplemented
        return super().__eq__(other) and other.predicate == self.predicate

    __hash__ = None

    def __repr__(self) -> str:
        return f"Custom({getattr(self.predicate, '__qualname__', self.predicate)!r})"


def constraint(
    predicate: Callable[[Any], Any] | None = None,
    /,
    *,
    type: str | None = None,
    negated_type: str | None = None,
    message: str | None = None,
    negated_message: str | None = None,
) -> Custom | Callable[[Callable[[Any], Any]], Custom]:
    """Build a Custom constraint from a predicate; usable bare or with options."""
    options = {
        key: value
        for key, value in {
            "type": type,
            "negated_type": negated_type,
            "message": message,
            "negated_message": negated_message,
        }.items()
        if value is not None
    }

    def decorator(func: Callable[[Any], Any]) -> Custom:
        return Custom(func, **options)

    return decorator if predicate is None else decorator(predicate)

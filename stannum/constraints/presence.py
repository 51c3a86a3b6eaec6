"""Presence and absence checks.

A value is absent when it is None or an empty sized value ("", [], {}).
"""
from __future__ import annotations

from collections.abc import Sized
from typing import Any

from stannum.constraints.base import Constraint


def is_blank(value: Any) -> bool:
    """True for None and for sized values of length zero."""
    if value is None: return True
    return isinstance(value, Sized) and len(value) == 0


class Presence(Constraint):
    NEGATED_TYPE = "stannum.constraints.present"
    TYPE = "stannum.constraints.absent"

    def matches(self, actual: Any) -> bool:
        return not is_blank(actual)


class Absence(Constraint):
    NEGATED_TYPE = Presence.TYPE
    TYPE = Presence.NEGATED_TYPE

    def matches(self, actual: Any) -> bool:
        return is_blank(actual)

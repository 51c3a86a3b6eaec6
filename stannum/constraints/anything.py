"""Constraints that always (or never) match."""
from __future__ import annotations

from typing import Any

from stannum.constraints.base import Constraint


class Anything(Constraint):
    """Matches every value, including None."""

    NEGATED_TYPE = "stannum.constraints.anything"
    TYPE = "stannum.constraints.nothing"

    def matches(self, actual: Any) -> bool: return True

    def does_not_match(self, actual: Any) -> bool: return False


class Nothing(Constraint):
    """Matches no value."""

    NEGATED_TYPE = "stannum.constraints.nothing"
    TYPE = "stannum.constraints.anything"

    def matches(self, actual: Any) -> bool: return False

    def does_not_match(self, actual: Any) -> bool: return True

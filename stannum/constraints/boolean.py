from __future__ import annotations

from typing import Any

from stannum.constraints.base import Constraint


class Boolean(Constraint):
    """Matches only True and False (not truthy or falsy values)."""

    NEGATED_TYPE = "stannum.constraints.is_boolean"
    TYPE = "stannum.constraints.is_not_boolean"

    def matches(self, actual: Any) -> bool:
        return actual is True or actual is False

"""Comparison against a single expected value."""
from __future__ import annotations

from typing import Any

from stannum.constraints.base import Constraint


class Equality(Constraint):
    """Matches values equal (==) to the expected value."""

    NEGATED_TYPE = "stannum.constraints.is_equal_to"
    TYPE = "stannum.constraints.is_not_equal_to"

    def __init__(self, expected_value: Any, **options: Any) -> None:
        super().__init__(expected_value=expected_value, **options)

    @property
    def expected_value(self) -> Any: return self.options["expected_value"]

    def matches(self, actual: Any) -> bool:
        return self.expected_value == actual

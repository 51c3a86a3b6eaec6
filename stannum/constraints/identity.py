from __future__ import annotations

from typing import Any

from stannum.constraints.base import Constraint


class Identity(Constraint):
    """Matches only the expected object itself (``is``)."""

    NEGATED_TYPE = "stannum.constraints.is_value"
    TYPE = "stannum.constraints.is_not_value"

    def __init__(self, expected_value: Any, **options: Any) -> None:
        super().__init__(expected_value=expected_value, **options)

    @property
    def expected_value(self) -> Any: return self.options["expected_value"]

    def matches(self, actual: Any) -> bool:
        return self.expected_value is actual

"""Enum Constraint - the value must be one of a fixed list."""
from __future__ import annotations

from typing import Any

from stannum.constraints.base import Constraint
from stannum.errors import Errors


class Enum(Constraint):
    """Matches values equal to one of the expected values.

        Enum("red", "green", "blue").matches("green")  # True
    """

    NEGATED_TYPE = "stannum.constraints.is_in_list"
    TYPE = "stannum.constraints.is_not_in_list"

    def __init__(self, first: Any, *rest: Any, **options: Any) -> None:
        super().__init__(expected_values=[first, *rest], **options)

    @property
    def expected_values(self) -> list[Any]: return self.options["expected_values"]

    def matches(self, actual: Any) -> bool:
        return any(actual == value for value in self.expected_values)

    def update_errors_for(self, *, actual: Any, errors: Errors) -> Errors:
        return errors.add(self.type, self.message, values=self.expected_values)

    def update_negated_errors_for(self, *, actual: Any, errors: Errors) -> Errors:
        return errors.add(self.negated_type, self.negated_message, values=self.expected_values)

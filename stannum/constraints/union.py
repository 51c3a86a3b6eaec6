"""Union Constraint - matches when any of several constraints matches."""
from __future__ import annotations

from typing import Any

from stannum.constraints.base import Constraint
from stannum.errors import Errors


class Union(Constraint):
    """Matches values accepted by at least one of the expected constraints.

        Union(Type(int), Type(float)).matches(1.5)  # True
    """

    NEGATED_TYPE = "stannum.constraints.is_in_union"
    TYPE = "stannum.constraints.is_not_in_union"

    def __init__(self, first: Constraint, *rest: Constraint, **options: Any) -> None:
        expected = [first, *rest]
        for constraint in expected:
            if not isinstance(constraint, Constraint):
                raise TypeError("expected constraint must be a Constraint")
        super().__init__(expected_constraints=expected, **options)

    @property
    def expected_constraints(self) -> list[Constraint]: return self.options["expected_constraints"]

    def matches(self, actual: Any) -> bool:
        return any(constraint.matches(actual) for constraint in self.expected_constraints)

    def update_errors_for(self, *, actual: Any, errors: Errors) -> Errors:
        values = [{"options": c.options, "type": c.type} for c in self.expected_constraints]
        return errors.add(self.type, self.message, constraints=values)

    def update_negated_errors_for(self, *, actual: Any, errors: Errors) -> Errors:
        values = [{"negated_type": c.negated_type, "options": c.options} for c in self.expected_constraints]
        return errors.add(self.negated_type, self.negated_message, constraints=values)
